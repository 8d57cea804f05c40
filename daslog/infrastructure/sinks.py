"""
Destination adapters for daslog.

A destination is any object with a ``write`` method. Text streams receive
``str``; binary streams receive the line encoded. Writes are best-effort:
a failing destination is reported to the diagnostics logger and skipped.
"""

import io
import sys
from typing import Any, Iterable, List, Optional, Sequence

from .error_handler import InvalidDestinationError
from .logger import logger


class StreamSink:
    """Wraps one destination and writes whole lines to it."""

    def __init__(self, stream: Any, encoding: str = "utf-8"):
        if not callable(getattr(stream, "write", None)):
            raise InvalidDestinationError(
                f"Destination has no write method: {stream!r}"
            )
        self.stream = stream
        self.encoding = encoding
        self._binary: Optional[bool] = self._detect_binary(stream)

    @staticmethod
    def _detect_binary(stream: Any) -> Optional[bool]:
        if isinstance(stream, io.TextIOBase):
            return False
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            return True
        # Unknown stream type, decided on first write
        return None

    @property
    def is_binary(self) -> Optional[bool]:
        return self._binary

    def write(self, line: str) -> bool:
        """
        Write a line to the destination.

        Args:
            line: Fully composed log line, newline included

        Returns:
            True if the destination accepted the line, False otherwise
        """
        try:
            if self._binary:
                self.stream.write(line.encode(self.encoding))
            elif self._binary is False:
                self.stream.write(line)
            else:
                self._write_probing(line)
            return True
        except Exception as e:
            logger.debug(f"Dropped log line for destination {self.stream!r}: {e}")
            return False

    def _write_probing(self, line: str) -> None:
        try:
            self.stream.write(line)
            self._binary = False
        except TypeError:
            self.stream.write(line.encode(self.encoding))
            self._binary = True

    def __repr__(self) -> str:
        return f"StreamSink({self.stream!r})"


def resolve_sinks(
    destination: Any = None,
    destinations: Optional[Iterable[Any]] = None,
    encoding: str = "utf-8",
) -> List[StreamSink]:
    """
    Build the ordered sink list for a logger.

    The single ``destination`` comes first, followed by ``destinations``.
    With neither given, the process stdout is used.

    Raises:
        InvalidDestinationError: If any destination cannot be written to
    """
    streams: List[Any] = []
    if destination is not None:
        streams.append(destination)
    if destinations is not None:
        streams.extend(destinations)
    if not streams:
        streams.append(sys.stdout)

    return [StreamSink(stream, encoding) for stream in streams]


def write_line(sinks: Sequence[StreamSink], line: str) -> int:
    """Write ``line`` to every sink in order and return how many accepted it."""

    return sum(1 for sink in sinks if sink.write(line))


__all__ = [
    "StreamSink",
    "resolve_sinks",
    "write_line",
]
