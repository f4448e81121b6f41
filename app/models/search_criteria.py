"""
Search criteria for blacklist lookups.

Not persisted. identifier is matched exactly, first_name and last_name
as substrings; populated fields are AND-combined.
"""

from dataclasses import dataclass


@dataclass
class SearchCriteria:
    """Partially-populated blacklist search descriptor."""

    identifier: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    def is_empty(self) -> bool:
        """Check whether no field carries a value."""
        return not (self.identifier or self.first_name or self.last_name)
