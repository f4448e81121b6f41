"""
Remove from blacklist handler.

/removebl <id> - admin only.
"""

from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message
from loguru import logger

from app.services.blacklist_service import BlacklistService
from app.utils.exceptions import BlacklistError
from bot.utils.admin_checks import require_admin
from bot.utils.command_args import CommandArgsError, parse_remove_args
from bot.utils.formatters import user_message_for


router = Router()


@router.message(Command("removebl"))
async def cmd_remove_from_blacklist(
    message: Message,
    command: CommandObject,
    blacklist_service: BlacklistService,
    is_admin: bool = False,
) -> None:
    """Remove a blacklist entry by ID."""
    if not await require_admin(message, is_admin):
        return

    try:
        entry_id = parse_remove_args(command.args)
    except CommandArgsError as e:
        await message.answer(f"❌ {e}\nUsage: /removebl <id>")
        return

    try:
        removed = await blacklist_service.remove_entry(entry_id)
    except BlacklistError as e:
        logger.warning(f"/removebl failed for id={entry_id}: {e}")
        await message.answer(user_message_for(e))
        return

    if removed:
        logger.info(f"Admin {message.from_user.id} removed blacklist entry {entry_id}")
        await message.answer(f"✅ Blacklist entry {entry_id} removed")
    else:
        await message.answer(f"❌ No blacklist entry found with ID: {entry_id}")
