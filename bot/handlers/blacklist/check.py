"""
Check blacklist handler.

/checkbl <identifier> or /checkbl id=.. first=.. last=.. - anyone.
"""

from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message
from loguru import logger

from app.services.blacklist_service import BlacklistService
from app.utils.exceptions import BlacklistError
from bot.utils.command_args import CommandArgsError, parse_check_args
from bot.utils.formatters import format_entries, user_message_for


router = Router()


@router.message(Command("checkbl"))
async def cmd_check_blacklist(
    message: Message,
    command: CommandObject,
    blacklist_service: BlacklistService,
) -> None:
    """Search the blacklist."""
    try:
        criteria = parse_check_args(command.args)
    except CommandArgsError as e:
        await message.answer(
            f"❌ {e}\nUsage: /checkbl <identifier> or "
            "/checkbl first=<name> last=<name> id=<identifier>"
        )
        return

    try:
        entries = await blacklist_service.search_entries(criteria)
    except BlacklistError as e:
        logger.warning(f"/checkbl failed: {e}")
        await message.answer(user_message_for(e))
        return

    await message.answer(format_entries(entries))
