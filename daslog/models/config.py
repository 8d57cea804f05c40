"""
Configuration model for daslog loggers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Sequence, Union

from .levels import UrgencyLevel


# Receives (level, message) and replaces the built-in pipeline entirely
LogHandler = Callable[[UrgencyLevel, str], None]


@dataclass
class LoggerOptions:
    """
    Everything needed to build a Daslog.

    Prefix commands follow GNU ``date`` letters, e.g. ``"{{.O}} [{{.Q}}]: "``
    renders as ``"2016-01-04 16:52:36 [info]: "``. A custom handler makes
    every other option irrelevant.
    """

    # Threshold; each level includes the ones below it
    level: Union[UrgencyLevel, int, str] = UrgencyLevel.NONE
    prefix: str = ""

    # Sinks, written in order: destination first, then destinations.
    # Neither set means the process stdout.
    destination: Optional[Any] = None
    destinations: Optional[Sequence[Any]] = None

    handler: Optional[LogHandler] = None

    # Source of the local time used to render the prefix
    clock: Callable[[], datetime] = datetime.now
    encoding: str = "utf-8"  # For binary destinations

    def __post_init__(self) -> None:
        self.level = UrgencyLevel.coerce(self.level)

        if not isinstance(self.prefix, str):
            raise TypeError(f"Prefix must be a string, got {type(self.prefix).__name__}")

        if self.handler is not None and not callable(self.handler):
            raise TypeError("Handler must be callable")

        if not callable(self.clock):
            raise TypeError("Clock must be callable")

        if self.destinations is not None:
            self.destinations = tuple(self.destinations)


__all__ = [
    "LogHandler",
    "LoggerOptions",
]
