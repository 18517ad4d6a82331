"""Veteran points: cooldowns per user and a buffer of points awaiting storage."""

from __future__ import annotations

import threading
import time

from .textutil import user_id_to_mention

MESSAGE_POINTS = 5
REACTION_POINTS = 1
REACTION_COOLDOWN = 45.0
MESSAGE_COOLDOWN = 30.0
VETERAN_BUFFER_SIZE_MAX = 30

_KEY_SEPARATOR = ":"


def build_key(user_uid: str, guild_uid: str) -> str:
    """Join a user ID and a guild ID into one buffer key."""
    return user_uid + _KEY_SEPARATOR + guild_uid


def split_key(key: str) -> tuple[str, str]:
    """Split a buffer key back into its user ID and guild ID.

    Raises ValueError when the key holds no separator.
    """
    parts = key.split(_KEY_SEPARATOR)
    if len(parts) < 2:
        raise ValueError(f"not a veteran buffer key: {key!r}")
    return parts[0], parts[1]


def congrats_message(user_uid: str, com_prefix: str) -> str:
    """The message telling a user they may now take the veteran role."""
    return (
        "Congrats " + user_id_to_mention(user_uid)
        + " you can become a server veteran! Type `"
        + com_prefix + " role veteran` In this channel."
    )


class CooldownTracker:
    """Remembers when each key last counted, so it only counts once per cooldown."""

    def __init__(self, cooldown: float) -> None:
        self.cooldown = cooldown
        self._lock = threading.Lock()
        self._last: dict[str, float] = {}

    def is_reached(self, key: str, now: float | None = None) -> bool:
        """Return True and restart the cooldown if it has passed for ``key``.

        ``now`` is a time in seconds; it defaults to a monotonic clock.
        """
        if now is None:
            now = time.monotonic()
        with self._lock:
            last = self._last.get(key)
            if last is not None and last + self.cooldown > now:
                return False
            self._last[key] = now
            return True


class VeteranBuffer:
    """Collects points per user and guild until enough have built up to store."""

    def __init__(self, max_size: int = VETERAN_BUFFER_SIZE_MAX) -> None:
        self.max_size = max_size
        self._lock = threading.Lock()
        self._points: dict[str, int] = {}
        self._remaining = max_size

    def add(self, user_uid: str, guild_uid: str, points: int) -> bool:
        """Add points for a user in a guild.

        Returns True once more than ``max_size`` additions have been made
        since the last drain, meaning the buffer should be drained.
        """
        key = build_key(user_uid, guild_uid)
        with self._lock:
            self._points[key] = self._points.get(key, 0) + points
            self._remaining -= 1
            return self._remaining < 0

    def drain(self) -> list[tuple[str, str, int]]:
        """Empty the buffer, returning ``(user_uid, guild_uid, points)`` entries."""
        with self._lock:
            entries = [(*split_key(key), count) for key, count in self._points.items()]
            self._points = {}
            self._remaining = self.max_size
        return entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)