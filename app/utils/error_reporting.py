"""
Error reporting sink.

Every failure path in the repository and service reports a structured
event here: the operation name plus either the list of validation
messages or the underlying infrastructure error.
"""

from typing import Protocol

from loguru import logger

from app.utils.exceptions import (
    DuplicateEntryError,
    EntryValidationError,
)


class ErrorReporter(Protocol):
    """Callable receiving (operation, error) for every failure."""

    def __call__(self, operation: str, error: BaseException) -> None: ...


def report_error(operation: str, error: BaseException) -> None:
    """
    Log a structured failure event.

    Caller mistakes (validation, duplicates) are logged at WARNING,
    everything else at ERROR with the traceback attached.

    Args:
        operation: Operation name, e.g. "BlacklistService.add_entry"
        error: The failure
    """
    bound = logger.bind(operation=operation, error_type=type(error).__name__)

    if isinstance(error, EntryValidationError):
        bound.bind(errors=error.errors).warning(
            f"{operation}: validation failed ({len(error.errors)} errors)"
        )
    elif isinstance(error, DuplicateEntryError):
        bound.bind(identifier=error.identifier).warning(
            f"{operation}: duplicate entry"
        )
    else:
        bound.opt(exception=error).error(f"{operation}: {error}")
