#!/usr/bin/env python3
"""Create the blacklist schema and print table stats."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from app.config.database import ConnectionManager
from app.config.settings import settings
from app.repositories.schema_manager import SchemaManager

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def initialize_database(connection_manager: ConnectionManager) -> None:
    """
    Connect, create the schema, verify it and report stats.

    The connection is always closed, also on failure.

    Raises:
        RuntimeError: If the created schema does not verify
    """
    schema = SchemaManager(connection_manager)

    try:
        logger.info("Starting database initialization...")
        await connection_manager.connect()

        await schema.initialize()

        if not await schema.verify():
            raise RuntimeError("Schema verification failed")

        stats = await schema.get_table_stats()
        logger.success("Database initialization completed successfully")
        logger.info(f"Current entries: {stats.total_entries}")
    finally:
        await connection_manager.disconnect()


if __name__ == "__main__":
    try:
        asyncio.run(initialize_database(ConnectionManager.from_settings(settings)))
    except Exception as e:
        logger.exception(f"Database initialization failed: {e}")
        sys.exit(1)
