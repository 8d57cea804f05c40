"""
Core data models API surface for daslog.

Re-exports model classes so callers can write ``from daslog.models import X``.
"""

from .levels import LEVEL_NAMES, UrgencyLevel
from .prefix import URGENCY_SENTINEL, CompiledPrefix, format_moment
from .config import LogHandler, LoggerOptions

__all__ = [
    # Level models
    "LEVEL_NAMES",
    "UrgencyLevel",
    # Prefix models
    "URGENCY_SENTINEL",
    "CompiledPrefix",
    "format_moment",
    # Config models
    "LogHandler",
    "LoggerOptions",
]
