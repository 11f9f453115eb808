from __future__ import annotations

import heapq
import itertools
from typing import Callable


class TimerHandle:
    def __init__(self, deadline: int, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"<TimerHandle deadline={self.deadline} {state}>"


class Scheduler:
    """One-shot deferred callbacks against a millisecond clock.

    Nothing runs on its own: the host calls run_due() between steps, so
    callbacks never interleave with an engine step.
    """

    def __init__(self, clock: Callable[[], int]):
        self.clock = clock
        self._queue: list[tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_ms}")
        handle = TimerHandle(self.clock() + delay_ms, callback)
        heapq.heappush(self._queue, (handle.deadline, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def run_due(self, now: int | None = None) -> int:
        if now is None:
            now = self.clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.cancelled = True
            handle.callback()
            fired += 1
        return fired
