"""Bot utilities"""

from bot.utils.admin_checks import is_admin_user, require_admin
from bot.utils.command_args import (
    CommandArgsError,
    parse_add_args,
    parse_check_args,
    parse_remove_args,
)
from bot.utils.formatters import format_entries, format_entry, user_message_for

__all__ = [
    # Admin checks
    "is_admin_user",
    "require_admin",
    # Command arguments
    "CommandArgsError",
    "parse_add_args",
    "parse_check_args",
    "parse_remove_args",
    # Formatters
    "format_entries",
    "format_entry",
    "user_message_for",
]
