"""
Core layer for daslog: prefix compiler and logger facade.
"""

from .compiler import (
    TIME_PLACEHOLDERS,
    URGENCY_PLACEHOLDER,
    PLACEHOLDERS,
    is_template,
    compile_prefix,
)
from .logger import Daslog, new

__all__ = [
    "TIME_PLACEHOLDERS",
    "URGENCY_PLACEHOLDER",
    "PLACEHOLDERS",
    "is_template",
    "compile_prefix",
    "Daslog",
    "new",
]
