"""
Bot Initialization - Shutdown Module.

Module: shutdown.py
Handles graceful shutdown of the bot.
Closes database connections.
"""

from loguru import logger

from app.config.database import ConnectionManager


async def shutdown_handler(connection_manager: ConnectionManager | None) -> None:
    """Handle graceful shutdown."""
    logger.info("Graceful shutdown initiated...")

    if connection_manager is not None:
        try:
            await connection_manager.disconnect()
            logger.info("Database connections closed")
        except Exception as e:
            logger.warning(f"Error closing database: {e}")

    logger.info("Graceful shutdown complete")
