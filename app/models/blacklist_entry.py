"""
Blacklist entry model.

BlacklistRecord is the storage mapping of the blacklist_entries table.
BlacklistEntry is the immutable value handed to callers; the repository
maps rows into it.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.config.constants import (
    BLACKLIST_TABLE,
    CREATED_BY_MAX_LENGTH,
    IDENTIFIER_MAX_LENGTH,
    NAME_MAX_LENGTH,
)
from app.models.base import Base


class BlacklistRecord(Base):
    """
    Blacklisted identity - one row per identifier.

    updated_at is touched by SQLAlchemy-issued UPDATEs only; the table
    has no trigger, and no update operation exists.
    """

    __tablename__ = BLACKLIST_TABLE
    __table_args__ = (
        # Backs the one-entry-per-identifier rule; inserts that collide
        # surface as DuplicateEntryError.
        Index("uq_blacklist_entries_identifier", "identifier", unique=True),
        Index("ix_blacklist_entries_names", "first_name", "last_name"),
        Index("ix_blacklist_entries_created_by", "created_by"),
        Index("ix_blacklist_entries_created_at", "created_at"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )

    # Business key: phone number, account name or account number
    identifier: Mapped[str] = mapped_column(
        String(IDENTIFIER_MAX_LENGTH), nullable=False
    )
    first_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True
    )
    last_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True
    )

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    created_by: Mapped[str] = mapped_column(
        String(CREATED_BY_MAX_LENGTH), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<BlacklistRecord(id={self.id}, "
            f"identifier={self.identifier!r}, "
            f"created_by={self.created_by!r})>"
        )


@dataclass(frozen=True)
class BlacklistEntry:
    """Persisted blacklist entry as seen by callers."""

    id: int
    identifier: str
    created_at: datetime
    created_by: str
    first_name: str | None = None
    last_name: str | None = None

    @property
    def full_name(self) -> str | None:
        """First and last name joined, or None when neither is set."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else None


@dataclass
class CreateBlacklistEntryInput:
    """Input for creating a blacklist entry."""

    identifier: str
    created_by: str
    first_name: str | None = None
    last_name: str | None = None
