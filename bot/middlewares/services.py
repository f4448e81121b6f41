"""
Service middleware.

Injects the shared BlacklistService into handler data.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from app.services.blacklist_service import BlacklistService


class ServiceMiddleware(BaseMiddleware):
    """Provides `blacklist_service` to handlers."""

    def __init__(self, blacklist_service: BlacklistService) -> None:
        """
        Initialize service middleware.

        Args:
            blacklist_service: Service built once at startup
        """
        super().__init__()
        self.blacklist_service = blacklist_service

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        data["blacklist_service"] = self.blacklist_service
        return await handler(event, data)
