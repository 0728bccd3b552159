"""Debounce limiter: run once a burst of triggers has gone quiet."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from pacer.limiters.base import BaseLimiter, Invocation
from pacer.scheduling import Scheduler

logger = logging.getLogger(__name__)


class Debouncer(BaseLimiter):
    """Delay the callback until ``wait`` seconds pass without a new trigger.

    How it works:
        - Every trigger cancels the pending timer and starts a new one.
        - Trailing mode (default): when the timer expires, the callback runs
          with the arguments of the last trigger.
        - Immediate mode: the first trigger of a burst runs the callback
          right away. Later triggers only push back the end of the burst.

    Example::

        wait=1s, immediate=False

        t=0.0s  d("a")   -> timer set for t=1.0
        t=0.6s  d("b")   -> timer reset for t=1.6
        t=1.6s           -> callback("b")

        wait=1s, immediate=True

        t=0.0s  d("a")   -> callback("a"), burst open until t=1.0
        t=0.6s  d("b")   -> suppressed, burst open until t=1.6
        t=2.0s  d("c")   -> callback("c"), new burst

    The return value is the last result obtained in immediate mode, which
    may be stale. In trailing mode nothing runs synchronously, so it is
    always ``None`` unless the instance was built with ``immediate=True``.
    """

    __slots__ = ("_result", "immediate")

    def __init__(
        self,
        callback: Callable[..., Any],
        wait: float,
        immediate: bool = False,
        *,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        super().__init__(callback, wait, scheduler=scheduler, clock=clock)
        self.immediate = immediate
        self._result: Any = None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        invocation = Invocation(args, kwargs)
        call_now = self._timer is None

        if self._timer is not None:
            self._timer.cancel()

        if self.immediate:
            self._timer = self._scheduler.schedule(self.wait, self._close_burst)
            if call_now:
                self._result = self._invoke(invocation)
        else:
            self._timer = self._scheduler.schedule(self.wait, partial(self._later, invocation))

        return self._result

    def cancel(self) -> None:
        if self._timer is not None:
            logger.debug("Debounce cancelled for %r", self._callback)
        super().cancel()

    def _close_burst(self) -> None:
        self._timer = None

    def _later(self, invocation: Invocation) -> None:
        self._timer = None
        self._invoke(invocation)

    def __repr__(self) -> str:
        return (
            f"Debouncer({self._name}, wait={self.wait}, "
            f"immediate={self.immediate}, pending={self.pending})"
        )
