"""Decorator API for applying debounce and throttle behavior to functions."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast, overload

from pacer.config import DebounceConfig, ThrottleConfig
from pacer.limiters.registry import LimiterConfig, build_limiter
from pacer.scheduling import Scheduler

F = TypeVar("F", bound=Callable[..., Any])


def _wrap(
    fn: F,
    config: LimiterConfig,
    scheduler: Scheduler | None,
    clock: Callable[[], float] | None,
) -> F:
    if inspect.iscoroutinefunction(fn):
        raise TypeError(f"@{config.policy} only supports sync functions.")

    limiter = build_limiter(fn, config, scheduler=scheduler, clock=clock)

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return limiter(*args, **kwargs)

    wrapper.limiter = limiter  # type: ignore[attr-defined]
    wrapper.cancel = limiter.cancel  # type: ignore[attr-defined]

    return cast("F", wrapper)


@overload
def debounce(
    func: F,
    /,
) -> F: ...


@overload
def debounce(
    *,
    wait: float = 1.0,
    immediate: bool = False,
    scheduler: Scheduler | None = None,
    clock: Callable[[], float] | None = None,
) -> Callable[[F], F]: ...


def debounce(
    func: F | None = None,
    /,
    *,
    wait: float = 1.0,
    immediate: bool = False,
    scheduler: Scheduler | None = None,
    clock: Callable[[], float] | None = None,
) -> F | Callable[[F], F]:
    """Decorator that debounces calls to a function.

    Calls are forwarded with their original arguments. Only the last call of
    a burst runs, ``wait`` seconds after the burst went quiet; with
    ``immediate=True`` only the first call of a burst runs, synchronously.

    The returned function exposes ``limiter`` (the :class:`Debouncer`) and
    ``cancel()``. Decorating a method shares one limiter
    across all instances; ``self`` is passed through as the first argument.

    Args:
        func: The function to decorate (when used without parentheses).
        wait: Quiet-period length in seconds.
        immediate: Fire on the leading edge of a burst.
        scheduler: Time and timer source, defaults to the running asyncio loop.
        clock: Overrides the scheduler's time source.

    Examples:
    ```python
        @debounce(wait=0.3)
        def on_resize(width: int, height: int) -> None:
            relayout(width, height)

        @debounce
        def autosave() -> None:
            store.save()
    ```
    """
    config = DebounceConfig(wait=wait, immediate=immediate)

    def decorator(fn: F) -> F:
        return _wrap(fn, config, scheduler, clock)

    if func is not None:
        return decorator(func)

    return decorator


@overload
def throttle(
    func: F,
    /,
) -> F: ...


@overload
def throttle(
    *,
    wait: float = 1.0,
    leading: bool = True,
    trailing: bool = True,
    scheduler: Scheduler | None = None,
    clock: Callable[[], float] | None = None,
) -> Callable[[F], F]: ...


def throttle(
    func: F | None = None,
    /,
    *,
    wait: float = 1.0,
    leading: bool = True,
    trailing: bool = True,
    scheduler: Scheduler | None = None,
    clock: Callable[[], float] | None = None,
) -> F | Callable[[F], F]:
    """Decorator that throttles calls to a function to once per ``wait`` seconds.

    Args:
        func: The function to decorate (when used without parentheses).
        wait: Minimum spacing between executions in seconds.
        leading: Run on the first call of a burst.
        trailing: Run once more after the last call of a burst.
        scheduler: Time and timer source, defaults to the running asyncio loop.
        clock: Overrides the scheduler's time source.
    """
    config = ThrottleConfig(wait=wait, leading=leading, trailing=trailing)

    def decorator(fn: F) -> F:
        return _wrap(fn, config, scheduler, clock)

    if func is not None:
        return decorator(func)

    return decorator
