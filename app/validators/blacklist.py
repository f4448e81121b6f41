"""
Blacklist validators.

Pure functions that sanitize and validate blacklist entries and search
criteria before they reach storage. Validators collect every violated
constraint instead of stopping at the first one.
"""

from dataclasses import dataclass, field
from typing import Any

from app.config.constants import (
    CREATED_BY_MAX_LENGTH,
    IDENTIFIER_MAX_LENGTH,
    NAME_MAX_LENGTH,
)
from app.models.blacklist_entry import CreateBlacklistEntryInput
from app.models.search_criteria import SearchCriteria


@dataclass
class ValidationResult:
    """Outcome of a validation pass."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)


def _result(errors: list[str]) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=errors)


def _clean_required(value: Any) -> Any:
    """Trim a required string field; a missing value becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return value


def _clean_optional(value: Any) -> Any:
    """Trim an optional string field; blank values become None."""
    if isinstance(value, str):
        return value.strip() or None
    return value


def _check_required(
    errors: list[str], label: str, value: Any, max_length: int
) -> None:
    if value is None or not isinstance(value, str):
        errors.append(f"{label} is required and must be a string")
    elif not value.strip():
        errors.append(f"{label} cannot be empty")
    elif len(value) > max_length:
        errors.append(f"{label} cannot exceed {max_length} characters")


def _check_optional(
    errors: list[str],
    label: str,
    value: Any,
    max_length: int,
    allow_blank: bool = True,
) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        errors.append(f"{label} must be a string")
    elif not allow_blank and not value.strip():
        errors.append(f"{label} cannot be empty when provided")
    elif len(value) > max_length:
        errors.append(f"{label} cannot exceed {max_length} characters")


def sanitize_entry(entry: CreateBlacklistEntryInput) -> CreateBlacklistEntryInput:
    """
    Trim whitespace on every string field.

    Blank optional names become None so that no empty value is stored.

    Args:
        entry: Raw input

    Returns:
        New sanitized input; the argument is not modified
    """
    return CreateBlacklistEntryInput(
        identifier=_clean_required(entry.identifier),
        created_by=_clean_required(entry.created_by),
        first_name=_clean_optional(entry.first_name),
        last_name=_clean_optional(entry.last_name),
    )


def validate_entry(entry: CreateBlacklistEntryInput) -> ValidationResult:
    """
    Validate a blacklist entry input.

    Args:
        entry: Input to validate (normally already sanitized)

    Returns:
        ValidationResult with all violated constraints

    Examples:
        >>> validate_entry(CreateBlacklistEntryInput("0812345678", "U1")).is_valid
        True
        >>> validate_entry(CreateBlacklistEntryInput("", "")).errors
        ['Identifier cannot be empty', 'CreatedBy cannot be empty']
    """
    errors: list[str] = []

    _check_required(errors, "Identifier", entry.identifier, IDENTIFIER_MAX_LENGTH)
    _check_required(errors, "CreatedBy", entry.created_by, CREATED_BY_MAX_LENGTH)
    _check_optional(errors, "FirstName", entry.first_name, NAME_MAX_LENGTH)
    _check_optional(errors, "LastName", entry.last_name, NAME_MAX_LENGTH)

    return _result(errors)


def sanitize_search_criteria(criteria: SearchCriteria) -> SearchCriteria:
    """
    Trim every criteria field and drop blank ones.

    A LIKE predicate is never built from an empty pattern because blank
    fields come back as None.
    """
    return SearchCriteria(
        identifier=_clean_optional(criteria.identifier),
        first_name=_clean_optional(criteria.first_name),
        last_name=_clean_optional(criteria.last_name),
    )


def validate_search_criteria(criteria: SearchCriteria) -> ValidationResult:
    """
    Validate search criteria.

    At least one field must be provided; provided fields must be
    non-blank strings within their length bounds.

    Args:
        criteria: Criteria to validate (normally already sanitized)

    Returns:
        ValidationResult with all violated constraints
    """
    errors: list[str] = []

    if criteria.is_empty():
        errors.append(
            "At least one search criterion must be provided "
            "(identifier, firstName, or lastName)"
        )

    _check_optional(
        errors, "Identifier", criteria.identifier, IDENTIFIER_MAX_LENGTH,
        allow_blank=False,
    )
    _check_optional(
        errors, "FirstName", criteria.first_name, NAME_MAX_LENGTH,
        allow_blank=False,
    )
    _check_optional(
        errors, "LastName", criteria.last_name, NAME_MAX_LENGTH,
        allow_blank=False,
    )

    return _result(errors)


def validate_entry_id(entry_id: Any) -> ValidationResult:
    """
    Validate a blacklist entry ID.

    Args:
        entry_id: Value to check

    Returns:
        ValidationResult; valid only for positive integers (bool excluded)
    """
    if isinstance(entry_id, bool) or not isinstance(entry_id, int) or entry_id <= 0:
        return _result(["ID must be a positive integer"])
    return _result([])
