"""
Bot Initialization - Handlers Module.

Module: handlers.py
Registers all bot handlers.
"""

from aiogram import Dispatcher
from loguru import logger


def register_all_handlers(dp: Dispatcher) -> None:
    """Register help and blacklist command routers."""
    from bot.handlers import blacklist, help

    dp.include_router(help.router)
    dp.include_router(blacklist.router)

    logger.info("Handlers registered")
