"""Delayed-callback seam between the game core and an event loop."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Protocol

Callback = Callable[[], None]


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callback) -> None:
        """Run *callback* once, roughly *delay_ms* milliseconds from now."""
        ...


class ManualScheduler:
    """Virtual-clock scheduler driven explicitly by the caller.

    Callbacks due at the same instant run in the order they were scheduled.
    Callbacks scheduled while advancing run in the same ``advance`` call if
    they fall due before its end.
    """

    def __init__(self) -> None:
        self._now = 0
        self._queue: list[tuple[int, int, Callback]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay_ms: int, callback: Callback) -> None:
        heapq.heappush(self._queue, (self._now + max(0, delay_ms), next(self._counter), callback))

    def advance(self, ms: int) -> None:
        """Move the clock forward by *ms*, firing everything that falls due."""
        target = self._now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
        self._now = target

    def run_until_idle(self) -> None:
        while self._queue:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
