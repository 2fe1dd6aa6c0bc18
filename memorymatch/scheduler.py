"""Delayed-callback scheduling used for mismatch reverts."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable

__all__ = ["Scheduler", "ManualScheduler", "ScheduledCall"]

# Compatible with ``loop.call_later`` and textual's ``App.set_timer``.
Scheduler = Callable[[float, Callable[[], None]], object]


@dataclass(order=True, slots=True)
class ScheduledCall:
    """Callback queued on a :class:`ManualScheduler`."""

    due: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler:
    """Virtual clock that fires callbacks only when advanced explicitly."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[ScheduledCall] = []
        self._counter = itertools.count()

    def __call__(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        if delay < 0:
            raise ValueError("delay must not be negative")
        entry = ScheduledCall(self.now + delay, next(self._counter), callback)
        heapq.heappush(self._queue, entry)
        return entry

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks. Return how many ran."""

        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            self.now = entry.due
            entry.callback()
            fired += 1
        self.now = target
        return fired
