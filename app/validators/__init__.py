"""
Validators package.

Provides sanitization and validation for blacklist input.
"""

from app.validators.blacklist import (
    ValidationResult,
    sanitize_entry,
    sanitize_search_criteria,
    validate_entry,
    validate_entry_id,
    validate_search_criteria,
)


__all__ = [
    "ValidationResult",
    "sanitize_entry",
    "sanitize_search_criteria",
    "validate_entry",
    "validate_entry_id",
    "validate_search_criteria",
]
