from __future__ import annotations

import heapq
import itertools
import time
from typing import Callable

from routine_builder.application.ports.scheduler import SchedulerPort


class LoopScheduler(SchedulerPort):
    """
    Single-threaded timer queue.

    Callbacks never run on their own: the owning loop calls `run_due()`
    between commands, so UI state is only touched from that loop.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        due = self._clock() + max(0.0, delay_seconds)
        heapq.heappush(self._queue, (due, next(self._seq), callback))

    def run_due(self) -> int:
        """Run every callback whose time has come, including ones they schedule. Returns the count."""
        ran = 0
        while self._queue and self._queue[0][0] <= self._clock():
            _, _, callback = heapq.heappop(self._queue)
            callback()
            ran += 1
        return ran

    def next_delay(self) -> float | None:
        if not self._queue:
            return None
        return max(0.0, self._queue[0][0] - self._clock())

    def pending(self) -> int:
        return len(self._queue)

    def cancel_all(self) -> None:
        self._queue.clear()
