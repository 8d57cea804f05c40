"""
Exception hierarchy for daslog.

Every error is raised while a logger is being built. Logging calls
themselves never raise.
"""

from typing import Optional


class DaslogError(Exception):
    """Base exception for daslog errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self._format())

    def _format(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class PrefixError(DaslogError, ValueError):
    """Raised when a prefix template cannot be compiled."""


class TemplateSyntaxError(PrefixError):
    """Raised for malformed ``{{ ... }}`` syntax in a prefix."""

    def __init__(self, detail: str, original_error: Optional[Exception] = None):
        self.detail = detail
        super().__init__(f"daslog: prefix error: {detail}", original_error)


class UnknownPlaceholderError(PrefixError):
    """Raised when a prefix references a placeholder outside the known set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            "daslog: unknown format variable in prefix: {{.%s}}" % name
        )


class InvalidUrgencyLevelError(DaslogError, ValueError):
    """Raised when a configured urgency level cannot be resolved."""


class InvalidDestinationError(DaslogError, TypeError):
    """Raised when a destination does not expose a ``write`` method."""


__all__ = [
    "DaslogError",
    "PrefixError",
    "TemplateSyntaxError",
    "UnknownPlaceholderError",
    "InvalidUrgencyLevelError",
    "InvalidDestinationError",
]
