"""
Urgency level model for daslog.

Levels are ordered: a higher value means a more severe message. A logger
configured with a threshold admits a message iff ``0 < level <= threshold``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple, Union

from ..infrastructure.error_handler import InvalidUrgencyLevelError


# Index matches the level value
LEVEL_NAMES: Tuple[str, ...] = ("none", "notice", "info", "error", "critical")


class UrgencyLevel(IntEnum):
    """Declares how informative or severe a log message is."""

    NONE = 0        # No messages at all
    NOTICE = 1
    INFO = 2
    ERROR = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        """Lower-case name used when rendering the ``{{.Q}}`` placeholder."""

        return LEVEL_NAMES[self.value]

    def admits(self, level: int) -> bool:
        """Check whether a message of ``level`` passes this threshold."""

        if self is UrgencyLevel.NONE:
            return False
        return UrgencyLevel.NONE < level <= self

    @classmethod
    def coerce(cls, value: Union["UrgencyLevel", int, str]) -> "UrgencyLevel":
        """
        Build a level from an enum member, an int or a case-insensitive name.

        Args:
            value: Level, its numeric value, or its name (``"info"``)

        Returns:
            The matching UrgencyLevel

        Raises:
            InvalidUrgencyLevelError: If the value names no known level
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            name = value.strip().lower()
            if name in LEVEL_NAMES:
                return cls(LEVEL_NAMES.index(name))
            raise InvalidUrgencyLevelError(f"Unknown urgency level name: {value!r}")

        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidUrgencyLevelError(
                    f"Urgency level out of range: {value}", e
                )

        raise InvalidUrgencyLevelError(
            f"Unsupported urgency level type: {type(value).__name__}"
        )


__all__ = [
    "LEVEL_NAMES",
    "UrgencyLevel",
]
