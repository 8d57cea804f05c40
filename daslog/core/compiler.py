"""
Prefix template compiler for daslog.

Turns a raw prefix such as ``"{{.O}} [{{.Q}}]: "`` into a CompiledPrefix.
Date and time commands follow the GNU ``date`` letters and are rewritten
into strftime-style directives once, so every log call only has to format the
current time. The urgency command ``{{.Q}}`` is left as a slot filled in
per call.
"""

import re
from datetime import datetime
from functools import lru_cache
from typing import Dict, List

from ..models import CompiledPrefix, format_moment
from ..infrastructure.error_handler import TemplateSyntaxError, UnknownPlaceholderError
from ..infrastructure.logger import logger


####
##      PLACEHOLDER TABLE
#####
TIME_PLACEHOLDERS: Dict[str, str] = {
    "F": "%Y-%m-%d",            # full date             (2016-01-04)
    "T": "%H:%M:%S",            # time                  (16:52:36)
    "r": "%-I:%M:%S %p",        # 12-hour clock time    (4:52:36 PM)
    "Y": "%Y",                  # year                  (2016)
    "y": "%y",                  # last two digits       (16)
    "m": "%m",                  # month                 (01..12)
    "b": "%b",                  # abbreviated month     (Jan)
    "B": "%B",                  # full month            (January)
    "d": "%d",                  # day of month          (01..31)
    "a": "%a",                  # abbreviated weekday   (Mon)
    "A": "%A",                  # full weekday          (Monday)
    "H": "%H",                  # 24-hour clock hour    (00..23)
    "I": "%I",                  # 12-hour clock hour    (01..12)
    "M": "%M",                  # minute                (00..59)
    "S": "%S",                  # second                (00..60)
    "p": "%p",                  # AM or PM
    "O": "%Y-%m-%d %H:%M:%S",   # {{.F}} + " " + {{.T}}
}

URGENCY_PLACEHOLDER = "Q"

PLACEHOLDERS = frozenset(TIME_PLACEHOLDERS) | {URGENCY_PLACEHOLDER}

# A prefix without any of these is printed as is
_COMMAND_PATTERN = re.compile(r"{{\s*\.\w\s*}}")
_FIELD_PATTERN = re.compile(r"\s*\.(\w+)\s*\Z")

_ACTION_OPEN = "{{"
_ACTION_CLOSE = "}}"

# Any instant works; every part is formatted once before use
_REFERENCE_MOMENT = datetime(2016, 1, 4, 16, 52, 36)


def is_template(raw: str) -> bool:
    """Check whether ``raw`` contains at least one ``{{.X}}`` command."""

    return bool(_COMMAND_PATTERN.search(raw))


def _escape_literal(text: str) -> str:
    return text.replace("%", "%%")


def _field_name(body: str) -> str:
    """Extract the placeholder name from the inside of a ``{{ ... }}`` action."""

    if not body.strip():
        raise TemplateSyntaxError("missing value for command")

    match = _FIELD_PATTERN.match(body)
    if match is None:
        raise TemplateSyntaxError(f"unsupported action {{{{{body.strip()}}}}}")

    return match.group(1)


@lru_cache(maxsize=128)
def compile_prefix(raw: str) -> CompiledPrefix:
    """
    Validate a raw prefix and compile it for rendering.

    Args:
        raw: Prefix text, optionally containing ``{{.X}}`` commands

    Returns:
        CompiledPrefix ready to render

    Raises:
        TemplateSyntaxError: If an action is unclosed or is not a field reference
        TemplateSyntaxError: Also if the compiled layout fails to render
        UnknownPlaceholderError: If a command names an unknown placeholder
    """
    if not raw or not is_template(raw):
        return CompiledPrefix.literal(raw)

    parts: List[str] = []
    current: List[str] = []
    position = 0

    while True:
        start = raw.find(_ACTION_OPEN, position)
        if start == -1:
            current.append(_escape_literal(raw[position:]))
            break

        current.append(_escape_literal(raw[position:start]))

        end = raw.find(_ACTION_CLOSE, start + len(_ACTION_OPEN))
        if end == -1:
            raise TemplateSyntaxError(f"unclosed action at offset {start}")

        name = _field_name(raw[start + len(_ACTION_OPEN):end])
        if name == URGENCY_PLACEHOLDER:
            parts.append("".join(current))
            current = []
        elif name in TIME_PLACEHOLDERS:
            current.append(TIME_PLACEHOLDERS[name])
        else:
            raise UnknownPlaceholderError(name)

        position = end + len(_ACTION_CLOSE)

    parts.append("".join(current))

    compiled = CompiledPrefix(
        raw=raw,
        is_template=True,
        has_urgency=len(parts) > 1,
        layout_parts=tuple(parts),
    )
    for part in compiled.layout_parts:
        try:
            format_moment(_REFERENCE_MOMENT, part)
        except Exception as e:
            raise TemplateSyntaxError(f"cannot render layout {part!r}", e)

    logger.debug(f"Compiled prefix {raw!r} into layout {compiled.time_layout!r}")

    return compiled


__all__ = [
    "TIME_PLACEHOLDERS",
    "URGENCY_PLACEHOLDER",
    "PLACEHOLDERS",
    "is_template",
    "compile_prefix",
]
