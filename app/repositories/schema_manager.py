"""
Schema management for the blacklist table.

Creates, verifies, drops and inspects blacklist_entries through the
shared ConnectionManager. Production deployments run the Alembic
migration instead; this is used by scripts/init_db.py and tests.
"""

from dataclasses import dataclass
from datetime import datetime

from loguru import logger
from sqlalchemy import func, inspect, select
from sqlalchemy.engine import Connection

from app.config.database import ConnectionManager
from app.models.base import Base
from app.models.blacklist_entry import BlacklistRecord


table = BlacklistRecord.__table__

EXPECTED_COLUMNS = (
    "id",
    "identifier",
    "first_name",
    "last_name",
    "created_at",
    "created_by",
    "updated_at",
)


@dataclass
class TableStats:
    """Summary of blacklist_entries contents."""

    total_entries: int
    oldest_entry: datetime | None
    newest_entry: datetime | None


def _describe_table(sync_conn: Connection) -> tuple[list[str], list[str]] | None:
    inspector = inspect(sync_conn)
    if not inspector.has_table(table.name):
        return None

    columns = [col["name"].lower() for col in inspector.get_columns(table.name)]
    indexes = [idx["name"] for idx in inspector.get_indexes(table.name)]
    return columns, indexes


class SchemaManager:
    """Create and inspect the blacklist schema."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self.db = connection_manager
        self.logger = logger.bind(component="SchemaManager")

    async def initialize(self) -> None:
        """Create the table and its indexes if they do not exist."""
        self.logger.info("Initializing database schema...")

        await self.db.transaction(
            lambda conn: conn.run_sync(
                Base.metadata.create_all, tables=[table], checkfirst=True
            )
        )

        self.logger.info("Database schema initialized successfully")

    async def verify(self) -> bool:
        """
        Check that the table exists with every expected column.

        Returns:
            True if the schema is usable, False otherwise
        """
        async with self.db.acquire() as conn:
            description = await conn.run_sync(_describe_table)

        if description is None:
            self.logger.error(f"Table {table.name} not found")
            return False

        columns, indexes = description
        missing = [col for col in EXPECTED_COLUMNS if col not in columns]
        if missing:
            self.logger.error(f"Missing expected columns: {', '.join(missing)}")
            return False

        self.logger.info(
            f"Schema verification completed: {len(columns)} columns, "
            f"{len(indexes)} indexes"
        )
        return True

    async def drop(self) -> None:
        """Drop the table if it exists."""
        self.logger.warning(f"Dropping table {table.name}")

        await self.db.transaction(
            lambda conn: conn.run_sync(
                Base.metadata.drop_all, tables=[table], checkfirst=True
            )
        )

        self.logger.info("Database schema dropped successfully")

    async def reset(self) -> None:
        """Drop and recreate the table. All entries are lost."""
        await self.drop()
        await self.initialize()

    async def get_table_stats(self) -> TableStats:
        """
        Count entries and find the oldest and newest creation times.

        Returns:
            TableStats; timestamps are None for an empty table
        """
        stmt = select(
            func.count(table.c.id).label("total_entries"),
            func.min(table.c.created_at).label("oldest_entry"),
            func.max(table.c.created_at).label("newest_entry"),
        )
        result = await self.db.query(stmt)
        row = result.rows[0]

        return TableStats(
            total_entries=row["total_entries"] or 0,
            oldest_entry=row["oldest_entry"],
            newest_entry=row["newest_entry"],
        )
