"""Pacer — debounce and throttle for Python callables.

Wraps a callback so that a stream of calls is turned into fewer executions,
either after the stream goes quiet (debounce) or at most once per window
(throttle). Timers run on the asyncio event loop by default.

Basic usage:

    from pacer import Debouncer, Throttler

    save = Debouncer(store.save, 0.5)
    save(doc)          # runs store.save(doc) 0.5s after the last call
    save.cancel()      # drop the pending save

    track = Throttler(send_position, 0.1, trailing=True)
    track(x, y)        # runs now, then at most every 0.1s

Decorator usage:

    from pacer import debounce, throttle

    @throttle(wait=0.2, leading=True, trailing=False)
    def on_scroll(offset: int) -> None:
        render(offset)
"""

from pacer.config import DebounceConfig, Policy, ThrottleConfig
from pacer.decorator import debounce, throttle
from pacer.limiters.base import BaseLimiter, Invocation
from pacer.limiters.debounce import Debouncer
from pacer.limiters.registry import build_limiter
from pacer.limiters.throttle import Throttler
from pacer.scheduling import CancelHandle, LoopScheduler, Scheduler, VirtualScheduler

__all__ = [
    "BaseLimiter",
    "CancelHandle",
    "DebounceConfig",
    "Debouncer",
    "Invocation",
    "LoopScheduler",
    "Policy",
    "Scheduler",
    "ThrottleConfig",
    "Throttler",
    "VirtualScheduler",
    "build_limiter",
    "debounce",
    "throttle",
]

__version__ = "0.1.0"
