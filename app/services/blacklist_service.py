"""
Blacklist service.

Validates caller input, enforces one entry per identifier and delegates
storage to BlacklistRepository.
"""

from loguru import logger

from app.models.blacklist_entry import BlacklistEntry, CreateBlacklistEntryInput
from app.models.search_criteria import SearchCriteria
from app.repositories.blacklist_repository import BlacklistRepository
from app.utils.error_reporting import ErrorReporter, report_error
from app.utils.exceptions import (
    BlacklistError,
    DuplicateEntryError,
    EntryValidationError,
    InfrastructureError,
    RepositoryError,
    UniquenessCheckError,
)
from app.validators.blacklist import (
    sanitize_entry,
    sanitize_search_criteria,
    validate_entry,
    validate_entry_id,
    validate_search_criteria,
)


def _clean_identifier(identifier: object) -> str:
    if not isinstance(identifier, str) or not identifier.strip():
        raise EntryValidationError(
            ["Identifier must be a non-empty string"],
            message="Invalid identifier",
        )
    return identifier.strip()


class BlacklistService:
    """
    Service for managing the shared blacklist.

    Every failure reaches the report sink once: storage failures are
    reported by the repository, everything else here.

    Duplicate prevention:
    - exists() pre-check gives a precise error for the common case
    - the unique index on identifier settles concurrent adds; the loser
      gets the same DuplicateEntryError from the repository
    """

    def __init__(
        self,
        repository: BlacklistRepository,
        report: ErrorReporter = report_error,
    ) -> None:
        """
        Initialize blacklist service.

        Args:
            repository: Blacklist repository
            report: Failure sink
        """
        self.repository = repository
        self.report = report
        self.logger = logger.bind(service="BlacklistService")

    def _report(self, operation: str, error: BlacklistError) -> None:
        # RepositoryError has already been reported by the repository
        if not isinstance(error, RepositoryError):
            self.report(f"BlacklistService.{operation}", error)

    def _fail(self, operation: str, error: BlacklistError) -> BlacklistError:
        self._report(operation, error)
        return error

    async def add_entry(self, entry: CreateBlacklistEntryInput) -> int:
        """
        Add a new blacklist entry.

        Args:
            entry: Entry data from the caller

        Returns:
            ID of the created entry

        Raises:
            EntryValidationError: With every violated constraint
            DuplicateEntryError: If the identifier is already blacklisted
            UniquenessCheckError: If the duplicate check could not run
            RepositoryError: If the insert failed
        """
        sanitized = sanitize_entry(entry)
        validation = validate_entry(sanitized)
        if not validation.is_valid:
            raise self._fail("add_entry", EntryValidationError(validation.errors))

        try:
            is_duplicate = await self.repository.exists(sanitized.identifier)
        except InfrastructureError as e:
            self._report("check_duplicate", e)
            raise UniquenessCheckError() from e

        if is_duplicate:
            raise self._fail(
                "add_entry", DuplicateEntryError(sanitized.identifier)
            )

        self.logger.info(
            f"Adding blacklist entry: identifier={sanitized.identifier}, "
            f"created_by={sanitized.created_by}"
        )

        try:
            entry_id = await self.repository.create(sanitized)
        except BlacklistError as e:
            self._report("add_entry", e)
            raise

        self.logger.info(
            f"Blacklist entry added: id={entry_id}, "
            f"identifier={sanitized.identifier}"
        )
        return entry_id

    async def search_entries(self, criteria: SearchCriteria) -> list[BlacklistEntry]:
        """
        Search entries by identifier and/or name substrings.

        Empty criteria are rejected before any query is issued.

        Args:
            criteria: Search criteria

        Returns:
            Matching entries, newest first
        """
        sanitized = sanitize_search_criteria(criteria)
        validation = validate_search_criteria(sanitized)
        if not validation.is_valid:
            raise self._fail(
                "search_entries",
                EntryValidationError(
                    validation.errors, message="Search validation failed"
                ),
            )

        try:
            results = await self.repository.search(sanitized)
        except BlacklistError as e:
            self._report("search_entries", e)
            raise

        self.logger.debug(f"Blacklist search completed: {len(results)} results")
        return results

    async def remove_entry(self, entry_id: int) -> bool:
        """
        Remove an entry by ID.

        Args:
            entry_id: Entry ID

        Returns:
            True if removed, False if no entry has this ID
        """
        validation = validate_entry_id(entry_id)
        if not validation.is_valid:
            raise self._fail(
                "remove_entry",
                EntryValidationError(validation.errors, message="Invalid ID"),
            )

        try:
            existing = await self.repository.find_by_id(entry_id)
            if existing is None:
                self.logger.warning(
                    f"Blacklist entry not found for removal: id={entry_id}"
                )
                return False

            deleted = await self.repository.delete_by_id(entry_id)
        except BlacklistError as e:
            self._report("remove_entry", e)
            raise

        if deleted:
            self.logger.info(
                f"Blacklist entry removed: id={entry_id}, "
                f"identifier={existing.identifier}"
            )
        else:
            # Removed concurrently between lookup and delete
            self.logger.warning(
                f"Blacklist entry not deleted (no rows affected): id={entry_id}"
            )
        return deleted

    async def check_duplicate(self, identifier: str) -> bool:
        """Check whether an identifier is already blacklisted."""
        identifier = _clean_identifier(identifier)

        try:
            return await self.repository.exists(identifier)
        except BlacklistError as e:
            self._report("check_duplicate", e)
            raise

    async def get_by_id(self, entry_id: int) -> BlacklistEntry | None:
        """Get entry by ID, or None if not found."""
        validation = validate_entry_id(entry_id)
        if not validation.is_valid:
            raise self._fail(
                "get_by_id",
                EntryValidationError(validation.errors, message="Invalid ID"),
            )

        try:
            return await self.repository.find_by_id(entry_id)
        except BlacklistError as e:
            self._report("get_by_id", e)
            raise

    async def find_by_identifier(self, identifier: str) -> list[BlacklistEntry]:
        """Entries with exactly this identifier."""
        identifier = _clean_identifier(identifier)

        try:
            return await self.repository.find_by_identifier(identifier)
        except BlacklistError as e:
            self._report("find_by_identifier", e)
            raise

    async def find_by_name(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> list[BlacklistEntry]:
        """Entries whose names contain the given substrings."""
        if not first_name and not last_name:
            raise self._fail(
                "find_by_name",
                EntryValidationError(
                    ["At least one name parameter must be provided"]
                ),
            )

        try:
            return await self.repository.find_by_name(first_name, last_name)
        except BlacklistError as e:
            self._report("find_by_name", e)
            raise
