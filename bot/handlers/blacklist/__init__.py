"""
Blacklist command module.

- add.py: /addbl (admin only)
- check.py: /checkbl
- remove.py: /removebl (admin only)

All handlers are combined into a single router for easy registration.
"""

from aiogram import Router

from bot.handlers.blacklist.add import router as add_router
from bot.handlers.blacklist.check import router as check_router
from bot.handlers.blacklist.remove import router as remove_router


router = Router()
router.include_router(add_router)
router.include_router(check_router)
router.include_router(remove_router)

__all__ = ["router"]
