"""
Services.

Business logic layer.
"""

from app.services.blacklist_service import BlacklistService


__all__ = [
    "BlacklistService",
]
