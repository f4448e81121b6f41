"""
Admin access checks for blacklist commands.

Usage:
    async def handler(message: Message, is_admin: bool = False):
        if not await require_admin(message, is_admin):
            return  # Denial already sent
"""

from aiogram.types import Message
from loguru import logger


DENIED_MESSAGE = "❌ You do not have permission to use this command."


def is_admin_user(telegram_id: int | None, admin_ids: list[int]) -> bool:
    """Check membership in the configured admin list."""
    return telegram_id is not None and telegram_id in admin_ids


async def require_admin(message: Message, is_admin: bool) -> bool:
    """
    Reply with a denial when the sender is not an admin.

    Args:
        message: Incoming message
        is_admin: Flag injected by AuthMiddleware

    Returns:
        True if the handler may proceed
    """
    if is_admin:
        return True

    user_id = message.from_user.id if message.from_user else None
    logger.warning(f"Admin command denied for user {user_id}: {message.text}")
    await message.answer(DENIED_MESSAGE)
    return False
