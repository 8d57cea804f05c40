"""
Logger facade for daslog.

A Daslog filters messages by urgency, renders the compiled prefix against
the current local time and writes one complete line to each destination.
"""

import threading
from dataclasses import replace
from typing import Any, Optional, Tuple, Union

from ..models import CompiledPrefix, LogHandler, LoggerOptions, UrgencyLevel
from ..infrastructure.error_handler import InvalidUrgencyLevelError
from ..infrastructure.logger import logger
from ..infrastructure.sinks import StreamSink, resolve_sinks, write_line
from .compiler import compile_prefix


def _interpolate(message: str, args: Tuple[Any, ...]) -> str:
    """printf-style formatting that never raises."""

    if not args:
        return message
    try:
        return message % args
    except (TypeError, ValueError, KeyError) as e:
        logger.debug(f"Could not interpolate {message!r}: {e}")
        return f"{message} {args!r}"


####
##      DASLOG
#####
class Daslog:
    """
    Damn simple logger.

    Usage:
        log = Daslog(LoggerOptions(prefix="{{.O}} [{{.Q}}]: ",
                                   level=UrgencyLevel.CRITICAL))
        log.info("test info message")

    prints "2016-01-04 21:16:41 [info]: test info message". Options are
    copied on construction, so later changes to them have no effect.
    """

    def __init__(self, options: Optional[LoggerOptions] = None):
        self._options = replace(options) if options is not None else LoggerOptions()
        self._prefix: CompiledPrefix = compile_prefix(self._options.prefix)
        self._sinks = resolve_sinks(
            self._options.destination,
            self._options.destinations,
            self._options.encoding,
        )
        self._write_lock = threading.Lock()

        self._handler: LogHandler = self._options.handler or self._handle

        logger.debug(
            f"Daslog ready: level={self.level.label}, "
            f"destinations={len(self._sinks)}, custom_handler={self.has_custom_handler}"
        )

    @property
    def level(self) -> UrgencyLevel:
        return self._options.level

    @property
    def prefix(self) -> CompiledPrefix:
        return self._prefix

    @property
    def destinations(self) -> Tuple[StreamSink, ...]:
        return tuple(self._sinks)

    @property
    def has_custom_handler(self) -> bool:
        return self._options.handler is not None

    def enabled_for(self, level: Union[UrgencyLevel, int]) -> bool:
        """Check whether the built-in pipeline would emit a message of ``level``."""

        return self.level.admits(level)

    def format_line(self, level: Union[UrgencyLevel, int], message: str) -> str:
        """Compose ``<prefix><message>\\n`` for the current time."""

        prefix = self._prefix.render(self._options.clock(), level)
        return f"{prefix}{message}\n"

    def _handle(self, level: Union[UrgencyLevel, int], message: str) -> None:
        """Default handler: filter, render and fan out."""

        if not self.enabled_for(level):
            return

        line = self.format_line(level, message)

        with self._write_lock:
            write_line(self._sinks, line)

    # ---- Logging API -------------------------------------------------------

    def _dispatch(self, level: Union[UrgencyLevel, int, str], message: str) -> None:
        try:
            urgency = UrgencyLevel.coerce(level)
        except InvalidUrgencyLevelError as e:
            logger.debug(f"Dropped message with unknown level: {e}")
            return

        self._handler(urgency, message)

    def log(self, level: Union[UrgencyLevel, int, str], message: Any) -> None:
        """
        Print a message of the given urgency to the log.

        The level may also be given by value or name (``"info"``). Unknown
        levels are dropped before reaching any handler.
        """
        self._dispatch(level, str(message))

    def logf(self, level: Union[UrgencyLevel, int, str], message: str, *args: Any) -> None:
        """Same as log, with printf-style arguments."""

        self._dispatch(level, _interpolate(str(message), args))

    def notice(self, message: Any) -> None:
        self.log(UrgencyLevel.NOTICE, message)

    def noticef(self, message: str, *args: Any) -> None:
        self.logf(UrgencyLevel.NOTICE, message, *args)

    def info(self, message: Any) -> None:
        self.log(UrgencyLevel.INFO, message)

    def infof(self, message: str, *args: Any) -> None:
        self.logf(UrgencyLevel.INFO, message, *args)

    def error(self, message: Any) -> None:
        self.log(UrgencyLevel.ERROR, message)

    def errorf(self, message: str, *args: Any) -> None:
        self.logf(UrgencyLevel.ERROR, message, *args)

    def critical(self, message: Any) -> None:
        self.log(UrgencyLevel.CRITICAL, message)

    def criticalf(self, message: str, *args: Any) -> None:
        self.logf(UrgencyLevel.CRITICAL, message, *args)

    def __repr__(self) -> str:
        return f"Daslog(level={self.level.name}, prefix={self._prefix.raw!r})"


def new(**options: Any) -> Daslog:
    """
    Build a Daslog from keyword options.

    Accepts the fields of LoggerOptions. Compile errors in the prefix are
    raised here and no logger is returned.
    """
    return Daslog(LoggerOptions(**options))


__all__ = [
    "Daslog",
    "new",
]
