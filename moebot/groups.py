"""Role group types: parsing them from user input and describing them."""

from __future__ import annotations

from .models import GroupType

ROLE_GROUP_MAX_NAME_LENGTH = 500
UNCATEGORIZED_GROUP = "Uncategorized"

_FROM_STRING = {
    "ANY": GroupType.ANY,
    "EXCLUSIVE": GroupType.EXCLUSIVE,
    "EXC": GroupType.EXCLUSIVE,
    "EXCLUSIVE NO REMOVE": GroupType.EXCLUSIVE_NO_REMOVE,
    "ENR": GroupType.EXCLUSIVE_NO_REMOVE,
    "NO MULTIPLES": GroupType.NO_MULTIPLES,
    "NOM": GroupType.NO_MULTIPLES,
}

_DESCRIPTIONS = {
    GroupType.ANY: "Any (ANY)",
    GroupType.EXCLUSIVE: "Exclusive (EXC)",
    GroupType.EXCLUSIVE_NO_REMOVE: "Exclusive No Remove (ENR)",
    GroupType.NO_MULTIPLES: "No Multiples (NOM)",
}


def group_type_from_string(s: str) -> GroupType:
    """Parse a group type typed by a user, ignoring case.

    Raises ValueError when the text names no group type.
    """
    try:
        return _FROM_STRING[s.upper()]
    except KeyError:
        raise ValueError(f"unknown group type: {s!r}") from None


def group_type_description(group_type: int) -> str:
    """Describe a group type together with its short form."""
    try:
        return _DESCRIPTIONS[GroupType(group_type)]
    except ValueError:
        return "Unknown"