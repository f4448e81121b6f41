"""
Command argument parsing.

Turns the raw argument text of /addbl, /checkbl and /removebl into
typed values. Arguments are split shell-style so that quoted values may
contain spaces: /addbl "ACME Ltd" John Smith
"""

import shlex
from dataclasses import dataclass

from app.models.search_criteria import SearchCriteria


# key=value aliases accepted by /checkbl
SEARCH_KEYS = {
    "id": "identifier",
    "identifier": "identifier",
    "first": "first_name",
    "firstname": "first_name",
    "first_name": "first_name",
    "last": "last_name",
    "lastname": "last_name",
    "last_name": "last_name",
}


class CommandArgsError(ValueError):
    """Raised when command arguments cannot be parsed."""
    pass


@dataclass
class AddCommandArgs:
    """Parsed /addbl arguments."""

    identifier: str
    first_name: str | None = None
    last_name: str | None = None


def split_args(args: str | None) -> list[str]:
    """Split argument text, honouring quotes."""
    if not args or not args.strip():
        return []
    try:
        return shlex.split(args)
    except ValueError as e:
        raise CommandArgsError(f"Cannot parse arguments: {e}") from e


def parse_add_args(args: str | None) -> AddCommandArgs:
    """
    Parse `/addbl <identifier> [first_name] [last_name]`.

    Args:
        args: Text after the command

    Returns:
        Parsed arguments

    Raises:
        CommandArgsError: If the identifier is missing or there are
            too many arguments
    """
    tokens = split_args(args)
    if not tokens:
        raise CommandArgsError(
            "Identifier is required (account name, account number, or phone number)"
        )
    if len(tokens) > 3:
        raise CommandArgsError(
            "Too many arguments. Quote values that contain spaces"
        )

    tokens += [None] * (3 - len(tokens))
    identifier, first_name, last_name = tokens
    return AddCommandArgs(
        identifier=identifier,
        first_name=first_name,
        last_name=last_name,
    )


def parse_check_args(args: str | None) -> SearchCriteria:
    """
    Parse `/checkbl <identifier>` or `/checkbl id=.. first=.. last=..`.

    Bare words are joined into the identifier.

    Raises:
        CommandArgsError: On an unknown key or when no criterion is given
    """
    fields: dict[str, str] = {}
    bare: list[str] = []

    for token in split_args(args):
        key, sep, value = token.partition("=")
        if not sep:
            bare.append(token)
            continue

        field_name = SEARCH_KEYS.get(key.lower())
        if field_name is None:
            raise CommandArgsError(f"Unknown search key: {key}")
        fields[field_name] = value

    if bare:
        if "identifier" in fields:
            raise CommandArgsError("Identifier given twice")
        fields["identifier"] = " ".join(bare)

    if not any(value.strip() for value in fields.values()):
        raise CommandArgsError(
            "Please provide at least one search criterion "
            "(identifier, first name, or last name)"
        )

    return SearchCriteria(**fields)


def parse_remove_args(args: str | None) -> int:
    """Parse `/removebl <id>` into a positive integer."""
    tokens = split_args(args)
    if len(tokens) != 1 or not tokens[0].isdecimal() or int(tokens[0]) <= 0:
        raise CommandArgsError(
            "Please provide a valid blacklist entry ID (positive number)"
        )
    return int(tokens[0])
