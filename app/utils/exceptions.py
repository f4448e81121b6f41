"""
Exception handling utilities.

Defines the blacklist error taxonomy and categorizes storage errors
for retry decisions.
"""

from sqlalchemy.exc import InterfaceError, OperationalError


class BlacklistError(Exception):
    """Base class for all blacklist errors."""
    pass


class ConfigurationError(BlacklistError):
    """Raised for a malformed connection string or settings. Never retried."""
    pass


class EntryValidationError(BlacklistError):
    """Raised when caller-supplied data violates one or more constraints."""

    def __init__(self, errors: list[str], message: str = "Validation failed") -> None:
        self.errors = list(errors)
        super().__init__(f"{message}: {', '.join(self.errors)}")


class DuplicateEntryError(BlacklistError):
    """Raised when an entry with the same identifier already exists."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f'Duplicate entry: An entry with identifier "{identifier}" already exists'
        )


class UniquenessCheckError(BlacklistError):
    """Raised when the duplicate check itself fails for an infrastructure reason."""

    def __init__(self, message: str = "Failed to verify entry uniqueness") -> None:
        super().__init__(message)


class InfrastructureError(BlacklistError):
    """Base class for storage failures."""
    pass


class DatabaseConnectionError(InfrastructureError):
    """Raised when the database cannot be reached within the retry budget."""
    pass


class PoolExhaustedError(InfrastructureError):
    """Raised when no pooled connection frees up before the acquire deadline."""
    pass


class RepositoryError(InfrastructureError):
    """Operation-specific wrapper around a storage failure."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(message)


# Transient errors the connection manager may retry with backoff
RETRYABLE_ERRORS = (
    OperationalError,  # Connection refused, server gone away
    InterfaceError,    # Driver-level connection failures
    OSError,           # Socket errors, ConnectionError, TimeoutError
)


def is_retryable(exc: BaseException) -> bool:
    """
    Check if exception is a transient storage failure.

    Args:
        exc: Exception to check

    Returns:
        True if the connection manager may reconnect and retry
    """
    return isinstance(exc, RETRYABLE_ERRORS)
