"""
daslog: a damn simple logger.

Routes urgency-tagged messages to one or more destinations, optionally
prefixed with a GNU ``date`` style template such as ``"{{.O}} [{{.Q}}]: "``.
"""

from .models import (
    LEVEL_NAMES,
    UrgencyLevel,
    CompiledPrefix,
    LogHandler,
    LoggerOptions,
)
from .core import Daslog, new, compile_prefix, PLACEHOLDERS
from .infrastructure import (
    DaslogError,
    PrefixError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
    InvalidUrgencyLevelError,
    InvalidDestinationError,
    set_verbose,
)

__version__ = "0.1.0"

__all__ = [
    "LEVEL_NAMES",
    "UrgencyLevel",
    "CompiledPrefix",
    "LogHandler",
    "LoggerOptions",
    "Daslog",
    "new",
    "compile_prefix",
    "PLACEHOLDERS",
    "DaslogError",
    "PrefixError",
    "TemplateSyntaxError",
    "UnknownPlaceholderError",
    "InvalidUrgencyLevelError",
    "InvalidDestinationError",
    "set_verbose",
]
