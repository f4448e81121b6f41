"""
Formatters
Reply text for blacklist commands
"""

from app.models.blacklist_entry import BlacklistEntry
from app.utils.exceptions import (
    BlacklistError,
    DuplicateEntryError,
    EntryValidationError,
    InfrastructureError,
    UniquenessCheckError,
)


# Telegram rejects messages longer than 4096 characters
MAX_LISTED_ENTRIES = 20


def format_entry(entry: BlacklistEntry) -> str:
    """
    Format one entry as a short block

    Args:
        entry: Blacklist entry

    Returns:
        Multi-line text
    """
    lines = [f"🆔 ID: {entry.id}", f"🔖 Identifier: {entry.identifier}"]
    if entry.full_name:
        lines.append(f"👤 Name: {entry.full_name}")
    lines.append(
        f"📅 Added: {entry.created_at:%Y-%m-%d %H:%M} by {entry.created_by}"
    )
    return "\n".join(lines)


def format_entries(entries: list[BlacklistEntry]) -> str:
    """Format search results, listing at most MAX_LISTED_ENTRIES."""
    if not entries:
        return "✅ No blacklist entries match the given criteria"

    shown = entries[:MAX_LISTED_ENTRIES]
    text = f"⚠️ Found {len(entries)} blacklist entries:\n\n"
    text += "\n\n".join(format_entry(entry) for entry in shown)

    if len(entries) > len(shown):
        text += f"\n\n... and {len(entries) - len(shown)} more"
    return text


def format_added(entry_id: int, identifier: str, full_name: str | None) -> str:
    text = f"✅ Successfully added blacklist entry (ID: {entry_id})\n"
    text += f"🔖 Identifier: {identifier}"
    if full_name:
        text += f"\n👤 Name: {full_name}"
    return text


def user_message_for(error: BlacklistError) -> str:
    """
    Map a service error to a reply that exposes no internals

    Args:
        error: Error raised by BlacklistService

    Returns:
        Reply text
    """
    if isinstance(error, DuplicateEntryError):
        return "❌ This identifier is already blacklisted."
    if isinstance(error, EntryValidationError):
        return f"❌ Invalid input: {', '.join(error.errors)}"
    if isinstance(error, UniquenessCheckError):
        return "❌ Could not verify the entry is unique. Please try again later."
    if isinstance(error, InfrastructureError):
        return "❌ Database error occurred. Please try again later."
    return "❌ Something went wrong. Please try again later."
