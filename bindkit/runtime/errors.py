"""Exception policy shared by environment adapters."""

from __future__ import annotations

import logging
from typing import TypeAlias

ErrorTypes: TypeAlias = tuple[type[BaseException], ...]

# Failures an adapter may tolerate while probing an optional backend feature.
RECOVERABLE_RUNTIME_ERRORS: ErrorTypes = (
    AttributeError,
    OSError,
    RuntimeError,
    TypeError,
    ValueError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated failure with its traceback attached."""
    if logger.isEnabledFor(level):
        logger.log(level, message, *args, exc_info=True)


__all__ = ["ErrorTypes", "RECOVERABLE_RUNTIME_ERRORS", "log_recoverable"]
