"""
Internal diagnostics logger for daslog.

This is the package's own ``logging`` channel (compiled layouts, swallowed
sink failures). It is separate from the loggers daslog builds for callers.
"""

import logging


logger = logging.getLogger("daslog")
logger.addHandler(logging.NullHandler())


def set_verbose(verbose: bool) -> None:
    """Switch the diagnostics logger between DEBUG and INFO."""

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = [
    "logger",
    "set_verbose",
]
