"""Shared fixtures for pacer tests."""

from typing import Any, NamedTuple

import pytest

from pacer.scheduling import VirtualScheduler


class Call(NamedTuple):
    at: float
    args: tuple[Any, ...]
    kwargs: dict[str, Any]


class Recorder:
    """Callback that records when and with what it was called."""

    def __init__(self, scheduler: VirtualScheduler) -> None:
        self.scheduler = scheduler
        self.calls: list[Call] = []

    def __call__(self, *args: Any, **kwargs: Any) -> int:
        self.calls.append(Call(self.scheduler.now(), args, kwargs))
        return len(self.calls)

    @property
    def args(self) -> list[tuple[Any, ...]]:
        return [c.args for c in self.calls]

    @property
    def times(self) -> list[float]:
        return [c.at for c in self.calls]


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def record(scheduler):
    return Recorder(scheduler)
