"""
Compiled prefix model for daslog.

A CompiledPrefix is produced once by the template compiler and rendered on
every log call. It never changes after construction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Tuple

from .levels import UrgencyLevel


# Marks an urgency slot inside ``time_layout``. Rendering works on
# ``layout_parts`` directly, so literal text can never be mistaken for it.
URGENCY_SENTINEL = "<{Q}>"

# Fixed English names, independent of the process locale
MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


# strftime-like directives understood by format_moment. ``%-I`` is the
# 12-hour clock hour without a leading zero.
DIRECTIVES: Dict[str, Callable[[datetime], str]] = {
    "Y": lambda m: "%04d" % m.year,
    "y": lambda m: "%02d" % (m.year % 100),
    "m": lambda m: "%02d" % m.month,
    "b": lambda m: MONTH_NAMES[m.month - 1][:3],
    "B": lambda m: MONTH_NAMES[m.month - 1],
    "d": lambda m: "%02d" % m.day,
    "a": lambda m: WEEKDAY_NAMES[m.weekday()][:3],
    "A": lambda m: WEEKDAY_NAMES[m.weekday()],
    "H": lambda m: "%02d" % m.hour,
    "I": lambda m: "%02d" % _hour12(m),
    "-I": lambda m: str(_hour12(m)),
    "M": lambda m: "%02d" % m.minute,
    "S": lambda m: "%02d" % m.second,
    "p": lambda m: "PM" if m.hour >= 12 else "AM",
    "%": lambda m: "%",
}

_DIRECTIVE_PATTERN = re.compile(r"%(-?.)", re.DOTALL)


def format_moment(moment: datetime, layout: str) -> str:
    """
    Format ``moment`` with a strftime-style layout using English names.

    Raises:
        ValueError: If the layout holds a directive outside DIRECTIVES
    """
    def expand(match: "re.Match") -> str:
        directive = DIRECTIVES.get(match.group(1))
        if directive is None:
            raise ValueError(f"Unsupported directive %{match.group(1)}")
        return directive(moment)

    return _DIRECTIVE_PATTERN.sub(expand, layout)


@dataclass(frozen=True)
class CompiledPrefix:
    """Immutable, ready-to-render form of a raw prefix string."""

    raw: str
    is_template: bool = False
    has_urgency: bool = False
    layout_parts: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.is_template and not self.layout_parts:
            raise ValueError("Template prefix requires at least one layout part")

        if self.has_urgency and len(self.layout_parts) < 2:
            raise ValueError("Urgency placeholder requires a split layout")

    @classmethod
    def literal(cls, raw: str) -> "CompiledPrefix":
        """Prefix emitted verbatim on every call."""

        return cls(raw=raw)

    @property
    def time_layout(self) -> str:
        """strftime layout with urgency slots shown as the sentinel marker."""

        if not self.is_template:
            return self.raw
        return URGENCY_SENTINEL.join(self.layout_parts)

    def render(self, moment: datetime, level: UrgencyLevel = UrgencyLevel.NONE) -> str:
        """
        Render the prefix for a given instant and message level.

        Args:
            moment: Local time of the log call
            level: Urgency of the message, used for ``{{.Q}}``

        Returns:
            Prefix text to put in front of the message
        """
        if not self.is_template:
            return self.raw

        rendered = [format_moment(moment, part) for part in self.layout_parts]
        if not self.has_urgency:
            return rendered[0]

        return UrgencyLevel(level).label.join(rendered)


__all__ = [
    "URGENCY_SENTINEL",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "DIRECTIVES",
    "format_moment",
    "CompiledPrefix",
]
