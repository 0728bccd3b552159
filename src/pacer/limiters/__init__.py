from pacer.limiters.base import BaseLimiter, Invocation
from pacer.limiters.debounce import Debouncer
from pacer.limiters.registry import build_limiter
from pacer.limiters.throttle import Throttler

__all__ = [
    "BaseLimiter",
    "Debouncer",
    "Invocation",
    "Throttler",
    "build_limiter",
]
