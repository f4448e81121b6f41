"""Unit tests for BlacklistService with a mocked repository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.models.blacklist_entry import CreateBlacklistEntryInput
from app.models.search_criteria import SearchCriteria
from app.repositories.blacklist_repository import BlacklistRepository
from app.services.blacklist_service import BlacklistService
from app.utils.exceptions import (
    DuplicateEntryError,
    EntryValidationError,
    RepositoryError,
    UniquenessCheckError,
)


@pytest.fixture
def service(mock_repository, report):
    return BlacklistService(mock_repository, report=report)


class TestAddEntry:
    """Tests for add_entry()."""

    @pytest.mark.asyncio
    async def test_adds_sanitized_entry(self, service, mock_repository):
        """Sanitized input is checked for duplicates and stored."""
        mock_repository.create.return_value = 11

        entry_id = await service.add_entry(
            CreateBlacklistEntryInput(" 0812345678 ", "U1", "  ", " Doe ")
        )

        assert entry_id == 11
        mock_repository.exists.assert_awaited_once_with("0812345678")
        stored = mock_repository.create.await_args.args[0]
        assert stored == CreateBlacklistEntryInput("0812345678", "U1", None, "Doe")

    @pytest.mark.asyncio
    async def test_validation_collects_all_errors(self, service, mock_repository, report):
        """Every violation is reported and storage is never touched."""
        with pytest.raises(EntryValidationError) as exc_info:
            await service.add_entry(CreateBlacklistEntryInput("", "x" * 21))

        assert exc_info.value.errors == [
            "Identifier cannot be empty",
            "CreatedBy cannot exceed 20 characters",
        ]
        assert str(exc_info.value).startswith("Validation failed: ")
        mock_repository.exists.assert_not_awaited()
        mock_repository.create.assert_not_awaited()
        report.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self, service, mock_repository):
        """An existing identifier is rejected without insert."""
        mock_repository.exists.return_value = True

        with pytest.raises(DuplicateEntryError) as exc_info:
            await service.add_entry(CreateBlacklistEntryInput("0812345678", "U1"))

        assert str(exc_info.value) == (
            'Duplicate entry: An entry with identifier "0812345678" already exists'
        )
        mock_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_uniqueness_check_failure(self, service, mock_repository, report):
        """A failing duplicate check is distinct from a duplicate."""
        cause = RepositoryError("exists", "Failed to check blacklist entry existence")
        mock_repository.exists.side_effect = cause

        with pytest.raises(UniquenessCheckError) as exc_info:
            await service.add_entry(CreateBlacklistEntryInput("0812345678", "U1"))

        assert str(exc_info.value) == "Failed to verify entry uniqueness"
        assert exc_info.value.__cause__ is cause
        mock_repository.create.assert_not_awaited()
        report.assert_not_called()

    @pytest.mark.asyncio
    async def test_lost_race_surfaces_as_duplicate(self, service, mock_repository, report):
        """The insert conflict from a concurrent add propagates unchanged."""
        error = DuplicateEntryError("dup1")
        mock_repository.create.side_effect = error

        with pytest.raises(DuplicateEntryError):
            await service.add_entry(CreateBlacklistEntryInput("dup1", "U1"))

        report.assert_called_once_with("BlacklistService.add_entry", error)

    @pytest.mark.asyncio
    async def test_insert_failure_propagates(self, service, mock_repository, report):
        """Storage failures were reported by the repository and are not re-reported."""
        error = RepositoryError("create", "Failed to create blacklist entry")
        mock_repository.create.side_effect = error

        with pytest.raises(RepositoryError):
            await service.add_entry(CreateBlacklistEntryInput("0812345678", "U1"))

        report.assert_not_called()


class TestSearchEntries:
    """Tests for search_entries()."""

    @pytest.mark.asyncio
    async def test_empty_criteria_issues_no_query(self, service, mock_repository):
        with pytest.raises(EntryValidationError) as exc_info:
            await service.search_entries(SearchCriteria(" ", None, ""))

        assert str(exc_info.value).startswith("Search validation failed: ")
        mock_repository.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_passes_sanitized_criteria(self, service, mock_repository, sample_entry):
        mock_repository.search.return_value = [sample_entry]

        results = await service.search_entries(SearchCriteria(first_name=" Jo "))

        assert results == [sample_entry]
        mock_repository.search.assert_awaited_once_with(SearchCriteria(first_name="Jo"))


class TestRemoveEntry:
    """Tests for remove_entry()."""

    @pytest.mark.asyncio
    async def test_missing_entry_returns_false_without_delete(
        self, service, mock_repository
    ):
        mock_repository.find_by_id.return_value = None

        assert await service.remove_entry(42) is False
        mock_repository.delete_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_removes_existing_entry(self, service, mock_repository, sample_entry):
        mock_repository.find_by_id.return_value = sample_entry
        mock_repository.delete_by_id.return_value = True

        assert await service.remove_entry(1) is True
        mock_repository.delete_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_concurrently_removed_entry(self, service, mock_repository, sample_entry):
        """Delete affecting no rows is reported as not removed."""
        mock_repository.find_by_id.return_value = sample_entry
        mock_repository.delete_by_id.return_value = False

        assert await service.remove_entry(1) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entry_id", [0, -1, "5", None])
    async def test_invalid_id(self, service, mock_repository, entry_id):
        with pytest.raises(EntryValidationError):
            await service.remove_entry(entry_id)

        mock_repository.find_by_id.assert_not_awaited()


class TestLookups:
    """Tests for the thin lookup operations."""

    @pytest.mark.asyncio
    async def test_check_duplicate(self, service, mock_repository):
        mock_repository.exists.return_value = True

        assert await service.check_duplicate(" 0812345678 ") is True
        mock_repository.exists.assert_awaited_once_with("0812345678")

    @pytest.mark.asyncio
    async def test_check_duplicate_rejects_blank(self, service, mock_repository):
        with pytest.raises(EntryValidationError):
            await service.check_duplicate("  ")

        mock_repository.exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_by_id(self, service, mock_repository, sample_entry):
        mock_repository.find_by_id.return_value = sample_entry

        assert await service.get_by_id(1) == sample_entry

    @pytest.mark.asyncio
    async def test_find_by_identifier(self, service, mock_repository, sample_entry):
        mock_repository.find_by_identifier.return_value = [sample_entry]

        assert await service.find_by_identifier("0812345678") == [sample_entry]

    @pytest.mark.asyncio
    async def test_find_by_name_requires_name(self, service, mock_repository):
        with pytest.raises(EntryValidationError):
            await service.find_by_name()

        mock_repository.find_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_by_name(self, service, mock_repository):
        await service.find_by_name(last_name="Doe")

        mock_repository.find_by_name.assert_awaited_once_with(None, "Doe")


class TestFailureReporting:
    """Each failure reaches the report sink exactly once."""

    @pytest.mark.asyncio
    async def test_storage_failure_reported_once(self, report):
        """Failing storage is reported by the repository only."""
        cause = OperationalError("SELECT", {}, Exception("server gone"))
        connection_manager = MagicMock()
        connection_manager.query = AsyncMock(side_effect=cause)
        service = BlacklistService(
            BlacklistRepository(connection_manager, report=report), report=report
        )

        with pytest.raises(UniquenessCheckError):
            await service.add_entry(CreateBlacklistEntryInput("0812345678", "U1"))
        with pytest.raises(RepositoryError):
            await service.search_entries(SearchCriteria(identifier="0812345678"))

        assert [call.args[0] for call in report.call_args_list] == [
            "BlacklistRepository.exists",
            "BlacklistRepository.search",
        ]
