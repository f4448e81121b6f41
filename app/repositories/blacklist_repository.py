"""
Blacklist repository.

The only component that issues SQL against blacklist_entries. Every
statement is a SQLAlchemy Core construct with bound parameters, executed
through the shared ConnectionManager.
"""

from typing import Any

from loguru import logger
from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError

from app.config.database import ConnectionManager
from app.models.blacklist_entry import (
    BlacklistEntry,
    BlacklistRecord,
    CreateBlacklistEntryInput,
)
from app.models.search_criteria import SearchCriteria
from app.repositories.query_builder import SearchQueryBuilder
from app.utils.error_reporting import ErrorReporter, report_error
from app.utils.exceptions import (
    DuplicateEntryError,
    EntryValidationError,
    RepositoryError,
)
from app.validators.blacklist import (
    sanitize_entry,
    sanitize_search_criteria,
    validate_entry,
    validate_entry_id,
    validate_search_criteria,
)


table = BlacklistRecord.__table__

ENTRY_COLUMNS = (
    table.c.id,
    table.c.identifier,
    table.c.first_name,
    table.c.last_name,
    table.c.created_at,
    table.c.created_by,
)

# Newest first; id breaks ties between rows inserted in the same instant
NEWEST_FIRST = (table.c.created_at.desc(), table.c.id.desc())


def _row_to_entry(row: dict[str, Any]) -> BlacklistEntry:
    """Map a storage row to an entry; NULL or empty names become None."""
    return BlacklistEntry(
        id=row["id"],
        identifier=row["identifier"],
        first_name=row["first_name"] or None,
        last_name=row["last_name"] or None,
        created_at=row["created_at"],
        created_by=row["created_by"],
    )


def _require_identifier(identifier: Any) -> str:
    if not isinstance(identifier, str) or not identifier.strip():
        raise EntryValidationError(
            ["Identifier is required and must be a non-empty string"]
        )
    return identifier.strip()


def _require_id(entry_id: Any) -> int:
    validation = validate_entry_id(entry_id)
    if not validation.is_valid:
        raise EntryValidationError(validation.errors)
    return entry_id


class BlacklistRepository:
    """
    Persistence for blacklist entries.

    Validation failures are raised as EntryValidationError unchanged.
    Storage failures are reported and re-raised as RepositoryError
    chained to the original cause.
    """

    def __init__(
        self,
        connection_manager: ConnectionManager,
        report: ErrorReporter = report_error,
    ) -> None:
        """
        Initialize blacklist repository.

        Args:
            connection_manager: Shared connection pool
            report: Failure sink
        """
        self.db = connection_manager
        self.report = report
        self.logger = logger.bind(component="BlacklistRepository")

    def _failure(
        self, operation: str, message: str, error: Exception
    ) -> RepositoryError:
        self.report(f"BlacklistRepository.{operation}", error)
        return RepositoryError(operation, message)

    async def _select(self, builder: SearchQueryBuilder) -> list[BlacklistEntry]:
        stmt = builder.apply(select(*ENTRY_COLUMNS)).order_by(*NEWEST_FIRST)
        result = await self.db.query(stmt)
        return [_row_to_entry(row) for row in result.rows]

    async def create(self, entry: CreateBlacklistEntryInput) -> int:
        """
        Insert a new entry.

        Args:
            entry: Entry data

        Returns:
            ID assigned by storage

        Raises:
            EntryValidationError: If the data is invalid
            DuplicateEntryError: If the identifier is already stored
            RepositoryError: On storage failure
        """
        sanitized = sanitize_entry(entry)
        validation = validate_entry(sanitized)
        if not validation.is_valid:
            self.logger.warning(
                f"Blacklist entry validation failed: {validation.errors}"
            )
            raise EntryValidationError(
                validation.errors, message="Invalid blacklist entry"
            )

        stmt = (
            insert(table)
            .values(
                identifier=sanitized.identifier,
                first_name=sanitized.first_name,
                last_name=sanitized.last_name,
                created_by=sanitized.created_by,
            )
            .returning(table.c.id)
        )

        try:
            result = await self.db.query(stmt)
        except IntegrityError as e:
            raise DuplicateEntryError(sanitized.identifier) from e
        except Exception as e:
            raise self._failure(
                "create", "Failed to create blacklist entry", e
            ) from e

        entry_id = result.rows[0]["id"]
        self.logger.info(
            f"Blacklist entry created: id={entry_id}, "
            f"identifier={sanitized.identifier}"
        )
        return entry_id

    async def find_by_identifier(self, identifier: str) -> list[BlacklistEntry]:
        """
        Find entries whose identifier matches exactly.

        Args:
            identifier: Identifier to look up

        Returns:
            Matching entries, newest first
        """
        identifier = _require_identifier(identifier)
        builder = SearchQueryBuilder().equals(table.c.identifier, identifier)

        try:
            entries = await self._select(builder)
        except Exception as e:
            raise self._failure(
                "find_by_identifier", "Failed to search blacklist entries", e
            ) from e

        self.logger.debug(
            f"Search by identifier completed: {len(entries)} results"
        )
        return entries

    async def find_by_name(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> list[BlacklistEntry]:
        """
        Find entries whose names contain the given substrings.

        Args:
            first_name: Substring of the first name
            last_name: Substring of the last name

        Returns:
            Matching entries, newest first

        Raises:
            EntryValidationError: If neither name is given
        """
        first_name = first_name.strip() if isinstance(first_name, str) else None
        last_name = last_name.strip() if isinstance(last_name, str) else None

        if not first_name and not last_name:
            raise EntryValidationError(
                [
                    "At least one name parameter (firstName or lastName) "
                    "must be provided"
                ]
            )

        builder = (
            SearchQueryBuilder()
            .contains(table.c.first_name, first_name)
            .contains(table.c.last_name, last_name)
        )

        try:
            return await self._select(builder)
        except Exception as e:
            raise self._failure(
                "find_by_name", "Failed to search blacklist entries by name", e
            ) from e

    async def search(self, criteria: SearchCriteria) -> list[BlacklistEntry]:
        """
        Combined search: exact identifier plus name substrings, AND-combined.

        Args:
            criteria: Search criteria

        Returns:
            Matching entries, newest first

        Raises:
            EntryValidationError: If the criteria are empty or invalid
        """
        sanitized = sanitize_search_criteria(criteria)
        validation = validate_search_criteria(sanitized)
        if not validation.is_valid:
            raise EntryValidationError(
                validation.errors, message="Invalid search criteria"
            )

        builder = (
            SearchQueryBuilder()
            .equals(table.c.identifier, sanitized.identifier)
            .contains(table.c.first_name, sanitized.first_name)
            .contains(table.c.last_name, sanitized.last_name)
        )

        try:
            entries = await self._select(builder)
        except Exception as e:
            raise self._failure(
                "search", "Failed to search blacklist entries", e
            ) from e

        self.logger.debug(
            f"Search completed: {len(builder)} predicates, {len(entries)} results"
        )
        return entries

    async def find_by_id(self, entry_id: int) -> BlacklistEntry | None:
        """
        Get entry by ID.

        Args:
            entry_id: Entry ID

        Returns:
            Entry or None if not found
        """
        entry_id = _require_id(entry_id)
        stmt = select(*ENTRY_COLUMNS).where(table.c.id == entry_id)

        try:
            result = await self.db.query(stmt)
        except Exception as e:
            raise self._failure(
                "find_by_id", "Failed to find blacklist entry", e
            ) from e

        if not result.rows:
            return None
        return _row_to_entry(result.rows[0])

    async def delete_by_id(self, entry_id: int) -> bool:
        """
        Delete entry by ID.

        Args:
            entry_id: Entry ID

        Returns:
            True if a row was removed, False if not found
        """
        entry_id = _require_id(entry_id)
        stmt = delete(table).where(table.c.id == entry_id)

        try:
            result = await self.db.query(stmt)
        except Exception as e:
            raise self._failure(
                "delete_by_id", "Failed to delete blacklist entry", e
            ) from e

        deleted = result.rowcount > 0
        if deleted:
            self.logger.info(f"Blacklist entry deleted: id={entry_id}")
        else:
            self.logger.debug(f"No blacklist entry to delete: id={entry_id}")
        return deleted

    async def exists(self, identifier: str) -> bool:
        """
        Check whether an identifier is stored.

        Args:
            identifier: Identifier to check

        Returns:
            True if at least one entry carries it
        """
        identifier = _require_identifier(identifier)
        stmt = (
            select(func.count().label("count"))
            .select_from(table)
            .where(table.c.identifier == identifier)
        )

        try:
            result = await self.db.query(stmt)
        except Exception as e:
            raise self._failure(
                "exists", "Failed to check blacklist entry existence", e
            ) from e

        return (result.rows[0]["count"] or 0) > 0

    async def count(self) -> int:
        """Total number of entries."""
        stmt = select(func.count().label("count")).select_from(table)

        try:
            result = await self.db.query(stmt)
        except Exception as e:
            raise self._failure(
                "count", "Failed to count blacklist entries", e
            ) from e

        return result.rows[0]["count"] or 0
