"""Abstract base class shared by the debounce and throttle limiters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, NamedTuple

from pacer.scheduling import CancelHandle, LoopScheduler, Scheduler


class Invocation(NamedTuple):
    """Arguments of one trigger, kept until the limiter acts on it.

    When a limiter wraps a method, ``args[0]`` is the instance, so the call
    context travels with the arguments on the deferred path as well.
    """

    args: tuple[Any, ...]
    kwargs: dict[str, Any]


class BaseLimiter(ABC):
    """Base class for all limiters.

    A limiter wraps *callback* and decides, for every call made to it,
    whether the callback runs now, later, or not at all. Each instance owns
    its state: at most one pending timer, plus whatever the subclass tracks.

    Subclasses must implement :meth:`__call__` and may extend :meth:`cancel`
    to reset additional state.

    Args:
        callback: The function to rate-limit.
        wait: Window length in seconds. Zero or negative values are allowed.
        scheduler: Source of time and deferred execution. Defaults to a
                   :class:`LoopScheduler` on the running asyncio loop.
        clock: Overrides ``scheduler.now`` as the time source.
    """

    __slots__ = ("_callback", "_clock", "_scheduler", "_timer", "wait")

    def __init__(
        self,
        callback: Callable[..., Any],
        wait: float,
        *,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._callback = callback
        self.wait = wait
        self._scheduler: Scheduler = scheduler or LoopScheduler()
        self._clock = clock or self._scheduler.now
        self._timer: CancelHandle | None = None

    @property
    def pending(self) -> bool:
        """Whether a timer is currently outstanding."""
        return self._timer is not None

    @abstractmethod
    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Register a trigger and return the callback's result, if any."""

    def cancel(self) -> None:
        """Discard any pending execution. Safe to call at any time."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _invoke(self, invocation: Invocation) -> Any:
        return self._callback(*invocation.args, **invocation.kwargs)

    @property
    def _name(self) -> str:
        return getattr(self._callback, "__qualname__", repr(self._callback))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name}, wait={self.wait}, pending={self.pending})"
