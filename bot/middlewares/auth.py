"""
Authentication middleware.

Marks the sender as admin when their Telegram ID is listed in
ADMIN_TELEGRAM_IDS.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, User

from bot.utils.admin_checks import is_admin_user


class AuthMiddleware(BaseMiddleware):
    """Injects `is_admin` into handler data."""

    def __init__(self, admin_ids: list[int]) -> None:
        """
        Initialize auth middleware.

        Args:
            admin_ids: Telegram IDs allowed to change the blacklist
        """
        super().__init__()
        self.admin_ids = list(admin_ids)

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        """
        Resolve admin flag for the event sender.

        Args:
            handler: Next handler
            event: Telegram event
            data: Handler data

        Returns:
            Handler result
        """
        user: User | None = data.get("event_from_user")
        data["is_admin"] = is_admin_user(user.id if user else None, self.admin_ids)
        return await handler(event, data)
