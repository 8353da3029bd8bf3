"""Exception policy for collaborator callbacks."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Failures tolerated from host-supplied measurement callbacks.
RecoverableCollaboratorErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_COLLABORATOR_ERRORS: RecoverableCollaboratorErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated exception with its traceback."""
    logger.log(level, message, exc_info=True)
