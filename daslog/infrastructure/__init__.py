"""
Infrastructure layer for daslog: errors, destinations and diagnostics.
"""

from .error_handler import (
    DaslogError,
    PrefixError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
    InvalidUrgencyLevelError,
    InvalidDestinationError,
)
from .logger import logger, set_verbose
from .sinks import StreamSink, resolve_sinks, write_line

__all__ = [
    "DaslogError",
    "PrefixError",
    "TemplateSyntaxError",
    "UnknownPlaceholderError",
    "InvalidUrgencyLevelError",
    "InvalidDestinationError",
    "logger",
    "set_verbose",
    "StreamSink",
    "resolve_sinks",
    "write_line",
]
