"""Per-channel timers that moderators start and anyone can check."""

from __future__ import annotations

import math
import threading
import time

MAX_WRITES = 4
WRITE_INTERVAL = 5.0
AFTER_SYNC_INTERVAL = 0.05
COMMAND_KEYS = ("TIMER",)


def _round_seconds(seconds: float) -> int:
    rounded = math.floor(abs(seconds) + 0.5)
    return -rounded if seconds < 0 else rounded


def fmt_duration(seconds: float) -> str:
    """Format a duration in seconds as ``hh:mm:ss``, rounded to the second."""
    total = _round_seconds(seconds)
    sign = -1 if total < 0 else 1
    hours, rest = divmod(abs(total), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign * hours:02d}:{sign * minutes:02d}:{sign * secs:02d}"


def sync_delay(elapsed: float, interval: float = WRITE_INTERVAL) -> float:
    """Seconds to wait so that ``elapsed`` lands on the next multiple of ``interval``."""
    if interval <= 0:
        raise ValueError("interval must be positive")
    return interval - math.fmod(elapsed, interval)


class ChannelTimers:
    """Start times of the timers running in each channel."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._started: dict[str, float] = {}

    def start(self, channel_id: str, now: float | None = None) -> None:
        """Start, or restart, the timer for a channel."""
        if now is None:
            now = time.monotonic()
        with self._lock:
            self._started[channel_id] = now

    def stop(self, channel_id: str) -> bool:
        """Stop the channel's timer; return False if none was running."""
        with self._lock:
            return self._started.pop(channel_id, None) is not None

    def elapsed(self, channel_id: str, now: float | None = None) -> float:
        """Seconds since the channel's timer started.

        Raises KeyError when no timer is running in the channel.
        """
        if now is None:
            now = time.monotonic()
        with self._lock:
            try:
                started = self._started[channel_id]
            except KeyError:
                raise KeyError(f"no timer started for channel {channel_id}") from None
        return now - started

    def __contains__(self, channel_id: object) -> bool:
        with self._lock:
            return channel_id in self._started