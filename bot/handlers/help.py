"""
Help command handler.

Lists the blacklist commands available to the sender.
"""

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message


router = Router(name="help")

USER_COMMANDS = (
    "/checkbl <identifier> - check an identifier\n"
    "/checkbl first=<name> last=<name> - search by name\n"
    "/help - show this help"
)

ADMIN_COMMANDS = (
    "/addbl <identifier> [first_name] [last_name] - add an entry\n"
    "/removebl <id> - remove an entry"
)


def build_help_text(is_admin: bool) -> str:
    """Help text for a regular user or an admin."""
    text = "🛡 Shared blacklist bot\n\n" + USER_COMMANDS
    if is_admin:
        text += "\n\nAdmin commands:\n" + ADMIN_COMMANDS
    text += '\n\nQuote values that contain spaces: /checkbl "ACME Ltd"'
    return text


@router.message(CommandStart())
@router.message(Command("help"))
async def cmd_help(message: Message, is_admin: bool = False) -> None:
    """
    Handle /start and /help.

    Args:
        message: Telegram message
        is_admin: Flag injected by AuthMiddleware
    """
    await message.answer(build_help_text(is_admin))
