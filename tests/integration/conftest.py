"""
Fixtures for integration tests.

Every test gets its own SQLite database file, driven through aiosqlite,
with the blacklist schema created.
"""

import pytest_asyncio
from sqlalchemy import event

from app.config.database import ConnectionManager
from app.repositories.blacklist_repository import BlacklistRepository
from app.repositories.schema_manager import SchemaManager
from app.services.blacklist_service import BlacklistService


@pytest_asyncio.fixture
async def connection_manager(tmp_path):
    """Connected manager over a fresh database with the schema created."""
    manager = ConnectionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'blacklist.db'}",
        pool_size=5,
        acquire_timeout=5.0,
    )
    await manager.connect()
    await SchemaManager(manager).initialize()

    yield manager

    await manager.disconnect()


@pytest_asyncio.fixture
async def pool_events(connection_manager):
    """Counts pool checkouts and checkins from this point on."""
    counts = {"checkout": 0, "checkin": 0}
    pool = connection_manager.engine.sync_engine.pool

    def on_checkout(*args):
        counts["checkout"] += 1

    def on_checkin(*args):
        counts["checkin"] += 1

    event.listen(pool, "checkout", on_checkout)
    event.listen(pool, "checkin", on_checkin)
    yield counts
    event.remove(pool, "checkout", on_checkout)
    event.remove(pool, "checkin", on_checkin)


@pytest_asyncio.fixture
async def repository(connection_manager):
    return BlacklistRepository(connection_manager)


@pytest_asyncio.fixture
async def service(repository):
    return BlacklistService(repository)
