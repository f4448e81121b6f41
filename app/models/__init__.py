"""
Database models.

Exports the SQLAlchemy model and the value types for easy imports.
"""

from app.models.base import Base
from app.models.blacklist_entry import (
    BlacklistEntry,
    BlacklistRecord,
    CreateBlacklistEntryInput,
)
from app.models.search_criteria import SearchCriteria


__all__ = [
    "Base",
    "BlacklistEntry",
    "BlacklistRecord",
    "CreateBlacklistEntryInput",
    "SearchCriteria",
]
