"""
Global Error Handler Middleware.

Catches exceptions the handlers did not turn into replies.
Sends a friendly message to the user and notifies the first admin.
"""

import traceback
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware, Bot
from aiogram.types import TelegramObject, User
from loguru import logger


class ErrorHandlerMiddleware(BaseMiddleware):
    """
    Global error handler middleware.

    - Logs all exceptions
    - Notifies an admin with technical details
    - Sends a friendly message to the user (no technical info)
    """

    def __init__(self, admin_ids: list[int]) -> None:
        super().__init__()
        self.admin_ids = list(admin_ids)

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        """Execute middleware."""
        try:
            return await handler(event, data)
        except Exception as e:
            logger.exception(f"Unhandled exception: {e}")

            bot: Bot | None = data.get("bot")
            user: User | None = data.get("event_from_user")

            if bot and user:
                try:
                    await bot.send_message(
                        chat_id=user.id,
                        text="❌ A temporary error occurred. Please try again later.",
                    )
                except Exception as user_notify_error:
                    logger.warning(f"Failed to notify user: {user_notify_error}")

            if bot and self.admin_ids:
                try:
                    error_trace = traceback.format_exc()[-800:]
                    user_info = "Unknown"
                    if user:
                        user_info = f"@{user.username}" if user.username else f"ID: {user.id}"

                    text = (
                        f"🚨 Unhandled error\n\n"
                        f"👤 User: {user_info}\n"
                        f"❌ Exception: {type(e).__name__}\n"
                        f"📝 Message: {str(e)[:200]}\n\n"
                        f"{error_trace}"
                    )
                    # First admin only to avoid spam
                    await bot.send_message(chat_id=self.admin_ids[0], text=text[:4096])
                except Exception as notify_error:
                    logger.error(f"Failed to notify admin: {notify_error}")

            return None
