"""
Middlewares.

Bot middlewares for request processing.
"""

from bot.middlewares.auth import AuthMiddleware
from bot.middlewares.error_handler import ErrorHandlerMiddleware
from bot.middlewares.services import ServiceMiddleware


__all__ = [
    "AuthMiddleware",
    "ErrorHandlerMiddleware",
    "ServiceMiddleware",
]
