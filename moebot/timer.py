"""Named timing marks for measuring how long parts of the bot take."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import pairwise

TIMER_MARK_TOTAL = "_total"
TIMER_MARK_START = "_start"
TIMER_MARK_END = "_end"
TIMER_MARK_COMMAND_BEGIN = "command_begin_"
TIMER_MARK_COMMAND_END = "command_end_"
TIMER_MARK_DB_BEGIN = "db_begin_"
TIMER_MARK_DB_END = "db_end_"


@dataclass
class TimerMark:
    """One named point in a timer; durations are in nanoseconds."""

    name: str
    duration: int = 0
    mark: int = field(default=0, repr=False)

    def to_dict(self) -> dict:
        return {"d": self.duration, "n": self.name}


@dataclass
class Timer:
    """A sequence of marks; the duration of each mark runs until the next one."""

    marks: list[TimerMark] = field(default_factory=list)
    clock: Callable[[], int] = field(default=time.monotonic_ns, repr=False, compare=False)

    def add_mark(self, name: str) -> None:
        self.marks.append(TimerMark(name=name, mark=self.clock()))

    def stop(self) -> dict[str, int]:
        """Stop the timer and return a mapping of mark names to durations."""
        self.add_mark(TIMER_MARK_END)
        total = self.marks[-1].mark - self.marks[0].mark
        times = {TIMER_MARK_TOTAL: total}
        self.marks.append(TimerMark(name=TIMER_MARK_TOTAL, duration=total, mark=self.clock()))
        for previous, current in pairwise(self.marks):
            elapsed = current.mark - previous.mark
            times[previous.name] = elapsed
            previous.duration = elapsed
        self.marks.pop()
        return times


def start_timer(name: str = "") -> Timer:
    """Start a timer whose first mark is ``name``, or ``_start`` if empty."""
    timer = Timer()
    timer.add_mark(name or TIMER_MARK_START)
    return timer