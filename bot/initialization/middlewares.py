"""
Bot Initialization - Middlewares Module.

Module: middlewares.py
Registers all bot middlewares in the correct order.
"""

from aiogram import Dispatcher

from app.services.blacklist_service import BlacklistService
from bot.middlewares.auth import AuthMiddleware
from bot.middlewares.error_handler import ErrorHandlerMiddleware
from bot.middlewares.services import ServiceMiddleware


def register_middlewares(
    dp: Dispatcher,
    blacklist_service: BlacklistService,
    admin_ids: list[int],
) -> None:
    """
    Register all middlewares.

    Order:
    1. Error handler (outermost, sees every failure)
    2. Auth (is_admin flag)
    3. Services (blacklist_service)

    Args:
        dp: Dispatcher instance
        blacklist_service: Shared service
        admin_ids: Telegram IDs with admin rights
    """
    dp.update.middleware(ErrorHandlerMiddleware(admin_ids))
    dp.update.middleware(AuthMiddleware(admin_ids))
    dp.update.middleware(ServiceMiddleware(blacklist_service))
