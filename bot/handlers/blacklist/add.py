"""
Add to blacklist handler.

/addbl <identifier> [first_name] [last_name] - admin only.
"""

from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message
from loguru import logger

from app.models.blacklist_entry import CreateBlacklistEntryInput
from app.services.blacklist_service import BlacklistService
from app.utils.exceptions import BlacklistError
from bot.utils.admin_checks import require_admin
from bot.utils.command_args import CommandArgsError, parse_add_args
from bot.utils.formatters import format_added, user_message_for


router = Router()


@router.message(Command("addbl"))
async def cmd_add_to_blacklist(
    message: Message,
    command: CommandObject,
    blacklist_service: BlacklistService,
    is_admin: bool = False,
) -> None:
    """Add an identifier to the blacklist."""
    if not await require_admin(message, is_admin):
        return

    try:
        args = parse_add_args(command.args)
    except CommandArgsError as e:
        await message.answer(
            f"❌ {e}\nUsage: /addbl <identifier> [first_name] [last_name]"
        )
        return

    entry = CreateBlacklistEntryInput(
        identifier=args.identifier,
        first_name=args.first_name,
        last_name=args.last_name,
        created_by=str(message.from_user.id),
    )

    try:
        entry_id = await blacklist_service.add_entry(entry)
    except BlacklistError as e:
        logger.warning(f"/addbl failed for {message.from_user.id}: {e}")
        await message.answer(user_message_for(e))
        return

    full_name = " ".join(
        part.strip() for part in (args.first_name, args.last_name) if part and part.strip()
    )
    await message.answer(
        format_added(entry_id, args.identifier.strip(), full_name or None)
    )
