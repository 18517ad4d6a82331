"""Small text and list helpers used throughout the bot."""

from __future__ import annotations

import re
from collections.abc import Iterable

_NON_ALPHA = re.compile(r"[^A-Za-z ]+")
_NEWLINES = re.compile(r"\r\n|\r|\n")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INTERVAL = re.compile(
    r"([0-9]+Y)?([0-9]+M)?([0-9]+W)?([0-9]+D)?([0-9]+h)?([0-9]+m)?"
)
_INTERVAL_ORDER = ("Y", "M", "W", "D", "h", "m")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def make_alpha_only(s: str) -> str:
    """Strip everything except ASCII letters and spaces."""
    return _NON_ALPHA.sub("", s)


def normalize_newlines(s: str) -> str:
    """Turn every CRLF, CR and LF line ending into a single LF."""
    return _NEWLINES.sub("\n", s)


def user_id_to_mention(user_id: str) -> str:
    """Build a mention for a user from their ID alone."""
    return f"<@{user_id}>"


def extract_channel_id(message: str) -> str:
    """Return the numeric ID inside a channel mention such as ``<#1234567>``.

    Raises ValueError when the text is not a valid channel mention.
    """
    if not 2 <= len(message) <= 23:
        raise ValueError(f"not a channel mention: {message!r}")
    channel_id = message[2:-1]
    if not _INTEGER.fullmatch(channel_id):
        raise ValueError(f"channel id is not numeric: {channel_id!r}")
    if not _INT64_MIN <= int(channel_id) <= _INT64_MAX:
        raise ValueError(f"channel id out of range: {channel_id!r}")
    return channel_id


def make_bold(s: str) -> str:
    return "**" + s + "**"


def make_italic(s: str) -> str:
    return "_" + s + "_"


def make_strikethrough(s: str) -> str:
    return "~~" + s + "~~"


def make_code(s: str) -> str:
    return "`" + s + "`"


def _is_separator(ch: str) -> bool:
    if ord(ch) < 0x80:
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def force_title_case(s: str) -> str:
    """Lower-case the string, then capitalise the first letter of every word.

    Underscores and digits count as part of a word.
    """
    out = []
    prev_is_separator = True
    for ch in s.lower():
        if prev_is_separator:
            titled = ch.title()
            out.append(titled if len(titled) == 1 else ch)
        else:
            out.append(ch)
        prev_is_separator = _is_separator(ch)
    return "".join(out)


def parse_interval_to_iso(interval: str) -> str:
    """Convert an interval such as ``1Y2M3W4D5h6m`` into ISO 8601 form.

    Raises ValueError for strings that are not in the ``nYnMnWnDnhnm`` format.
    """
    match = _INTERVAL.fullmatch(interval)
    if match is None:
        raise ValueError("Invalid interval string")
    parts = [group or "" for group in match.groups()]
    result = "P"
    for indicator in _INTERVAL_ORDER:
        result += "".join(part.upper() for part in parts if indicator in part)
        if indicator == "D":
            result += "T" if len(result) != 1 else "0DT"
    return result.strip("T")


def _fold(s: str) -> str:
    return s.lower()


def str_contains(items: Iterable[str], value: str, case_sensitive: bool) -> bool:
    """Report whether ``value`` is one of ``items``."""
    if case_sensitive:
        return any(item == value for item in items)
    folded = _fold(value)
    return any(_fold(item) == folded for item in items)


def str_contains_prefix(items: Iterable[str], value: str, case_sensitive: bool) -> bool:
    """Report whether any of ``items`` starts with ``value``."""
    if case_sensitive:
        return any(item.startswith(value) for item in items)
    upper = value.upper()
    return any(item.upper().startswith(upper) for item in items)


def subtract(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the values of ``first`` that do not appear in ``second``."""
    excluded = list(second)
    return [value for value in first if value not in excluded]