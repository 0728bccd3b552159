"""Maps each ``Policy`` enum member to a callable that builds a ``BaseLimiter``.

When you add a new policy:

1. Add a variant to the ``Policy`` enum in ``config.py`` and a config
   dataclass whose ``policy`` property returns it.
2. Add an entry to ``REGISTRY`` pointing to a factory that constructs the
   concrete limiter from the callback, the config and the scheduling options.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pacer.config import DebounceConfig, Policy, ThrottleConfig
from pacer.limiters.base import BaseLimiter
from pacer.limiters.debounce import Debouncer
from pacer.limiters.throttle import Throttler
from pacer.scheduling import Scheduler

LimiterConfig = DebounceConfig | ThrottleConfig
LimiterFactory = Callable[..., BaseLimiter]

REGISTRY: dict[Policy, LimiterFactory] = {
    Policy.DEBOUNCE: lambda callback, cfg, **options: Debouncer(
        callback,
        cfg.wait,
        cfg.immediate,
        **options,
    ),
    Policy.THROTTLE: lambda callback, cfg, **options: Throttler(
        callback,
        cfg.wait,
        leading=cfg.leading,
        trailing=cfg.trailing,
        **options,
    ),
}


def build_limiter(
    callback: Callable[..., Any],
    config: LimiterConfig,
    *,
    scheduler: Scheduler | None = None,
    clock: Callable[[], float] | None = None,
) -> BaseLimiter:
    """Resolve *config.policy* to a concrete ``BaseLimiter`` wrapping *callback*."""
    factory = REGISTRY.get(config.policy)
    if not factory:
        raise ValueError(
            f"Unknown policy: {config.policy!r}. Registered: {', '.join(p.value for p in REGISTRY)}"
        )
    return factory(callback, config, scheduler=scheduler, clock=clock)
