"""
Handlers.

Bot command handlers.
"""

from bot.handlers import blacklist, help


__all__ = [
    "blacklist",
    "help",
]
