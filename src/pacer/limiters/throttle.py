"""Throttle limiter: run at most once per window, on either edge of a burst."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pacer.limiters.base import BaseLimiter, Invocation
from pacer.scheduling import Scheduler

logger = logging.getLogger(__name__)


class Throttler(BaseLimiter):
    """Cap the callback to one execution per ``wait`` seconds.

    How it works:
        - ``leading``: the first trigger after a full window runs the callback
          synchronously.
        - ``trailing``: a trigger inside the window arms a single timer that
          fires when the window ends, with the arguments of the latest trigger
          seen by then.
        - A clock reading that moved backwards past the last execution counts
          as "the window is over", so the throttle cannot lock up.

    Example::

        wait=1s, leading=True, trailing=True

        t=0.0s  t("a")   -> callback("a")
        t=0.3s  t("b")   -> timer set for t=1.0
        t=0.7s  t("c")   -> saved, replaces "b"
        t=1.0s           -> callback("c")

    With ``leading=False`` the first trigger of a burst only opens the window,
    so nothing runs before ``wait`` seconds have passed. Disabling both edges
    is not supported: a warning is logged and the limiter keeps running, but
    which triggers fire is unspecified.

    Returns the callback's result when it ran during this call, else ``None``.
    """

    __slots__ = ("_pending", "_previous", "leading", "trailing")

    def __init__(
        self,
        callback: Callable[..., Any],
        wait: float,
        *,
        leading: bool = True,
        trailing: bool = True,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        super().__init__(callback, wait, scheduler=scheduler, clock=clock)
        self.leading = leading
        self.trailing = trailing
        self._previous: float | None = None
        self._pending: Invocation | None = None

        if not leading and not trailing:
            logger.warning(
                "Throttler for %s has both leading and trailing disabled; "
                "executions are unspecified",
                self._name,
            )

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        now = self._clock()
        if self._previous is None and not self.leading:
            self._previous = now

        if self._previous is None:
            remaining = 0.0
        else:
            remaining = self.wait - (now - self._previous)

        self._pending = Invocation(args, kwargs)

        if remaining <= 0 or remaining > self.wait:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._previous = now
            try:
                return self._invoke(self._pending)
            finally:
                if self._timer is None:
                    self._pending = None

        if self._timer is None and self.trailing:
            logger.debug("Trailing call for %s armed in %.3fs", self._name, remaining)
            self._timer = self._scheduler.schedule(remaining, self._later)

        if self._timer is None:
            self._pending = None

        return None

    def cancel(self) -> None:
        super().cancel()
        self._previous = None
        self._pending = None

    def _later(self) -> None:
        self._previous = self._clock() if self.leading else None
        self._timer = None
        invocation, self._pending = self._pending, None
        if invocation is not None:
            self._invoke(invocation)

    def __repr__(self) -> str:
        return (
            f"Throttler({self._name}, wait={self.wait}, leading={self.leading}, "
            f"trailing={self.trailing}, pending={self.pending})"
        )
