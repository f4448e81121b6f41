"""
Bot Initialization - Services Module.

Module: services.py
Builds the connection manager, repository and service once at startup.
"""

from loguru import logger

from app.config.database import ConnectionManager
from app.config.settings import Settings
from app.repositories.blacklist_repository import BlacklistRepository
from app.services.blacklist_service import BlacklistService


async def initialize_all_services(
    settings: Settings,
) -> tuple[ConnectionManager, BlacklistService]:
    """
    Connect to the database and build the blacklist service.

    Args:
        settings: Application settings

    Returns:
        Tuple of (connection_manager, blacklist_service)

    Raises:
        DatabaseConnectionError: If the database is unreachable
    """
    connection_manager = ConnectionManager.from_settings(settings)
    await connection_manager.connect()

    repository = BlacklistRepository(connection_manager)
    service = BlacklistService(repository)

    logger.info("Blacklist service initialized")
    return connection_manager, service
