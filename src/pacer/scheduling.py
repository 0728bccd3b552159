"""Clock and deferred-execution capabilities used by the limiters.

A limiter only needs two things from its host: the current time and a way to
run a callable once after a delay, with a handle that can cancel it. Both are
expressed as protocols so the limiters stay independent of the event loop and
can be driven by :class:`VirtualScheduler` in tests.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from asyncio import AbstractEventLoop, TimerHandle, get_running_loop
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class CancelHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def now(self) -> float: ...

    def schedule(self, delay: float, action: Callable[[], Any]) -> CancelHandle: ...


def _run_deferred(action: Callable[[], Any]) -> None:
    # Timer context: failures are reported, never re-raised into the host.
    try:
        action()
    except Exception:
        logger.exception("Deferred call %r failed", action)


class LoopScheduler:
    """Schedules deferred calls on the running asyncio event loop.

    Without an explicit *loop*, the running loop is looked up on every
    schedule, so a scheduler created at import time keeps working across
    successive ``asyncio.run`` calls. Not thread-safe: use it from the
    loop's own thread only.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> AbstractEventLoop:
        return self._loop or get_running_loop()

    def now(self) -> float:
        return time.monotonic()

    def schedule(self, delay: float, action: Callable[[], Any]) -> TimerHandle:
        return self._get_loop().call_later(max(0.0, delay), _run_deferred, action)

    def __repr__(self) -> str:
        return f"LoopScheduler(loop={self._loop!r})"


class _VirtualTimer:
    __slots__ = ("action", "active", "due", "owner")

    def __init__(self, owner: VirtualScheduler, due: float, action: Callable[[], Any]) -> None:
        self.owner = owner
        self.due = due
        self.action = action
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self.owner._discard()


class VirtualScheduler:
    """Deterministic clock and timer queue driven by explicit time steps.

    Time only moves when :meth:`advance` is called. Timers fire in deadline
    order, ties in the order they were scheduled. :meth:`jump` shifts what
    :meth:`now` reports without touching timer deadlines, which models an
    adjustment of the system clock under a monotonic timer facility.

    Cancelled timers are dropped from the queue once they make up half of
    it, so the queue stays proportional to the live timers.

    Example::

        scheduler = VirtualScheduler()
        debounced = Debouncer(save, 1.0, scheduler=scheduler)

        debounced("a")
        scheduler.advance(0.5)
        debounced("b")
        scheduler.advance(1.0)   # save("b") runs here
    """

    __slots__ = ("_cancelled", "_counter", "_elapsed", "_offset", "_queue")

    def __init__(self, start: float = 0.0) -> None:
        self._elapsed = start
        self._offset = 0.0
        self._counter = itertools.count()
        self._queue: list[tuple[float, int, _VirtualTimer]] = []
        self._cancelled = 0

    @property
    def elapsed(self) -> float:
        """Virtual time as seen by the timer queue."""
        return self._elapsed

    @property
    def pending(self) -> int:
        """Number of timers that are still due to fire."""
        return len(self._queue) - self._cancelled

    def now(self) -> float:
        return self._elapsed + self._offset

    def schedule(self, delay: float, action: Callable[[], Any]) -> _VirtualTimer:
        timer = _VirtualTimer(self, self._elapsed + max(0.0, delay), action)
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    def advance(self, seconds: float) -> None:
        """Move time forward by *seconds*, firing every timer that falls due."""
        target = self._elapsed + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if not timer.active:
                self._cancelled -= 1
                continue
            timer.active = False
            self._elapsed = max(self._elapsed, due)
            _run_deferred(timer.action)
        self._elapsed = max(self._elapsed, target)

    def _discard(self) -> None:
        self._cancelled += 1
        if self._cancelled * 2 >= len(self._queue):
            self._queue = [entry for entry in self._queue if entry[2].active]
            heapq.heapify(self._queue)
            self._cancelled = 0

    def jump(self, seconds: float) -> None:
        """Adjust the clock reading by *seconds* (may be negative)."""
        self._offset += seconds

    def __repr__(self) -> str:
        return f"VirtualScheduler(now={self.now()}, pending={self.pending})"
