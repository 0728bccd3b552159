"""Configuration types for the pacer library."""

from dataclasses import dataclass
from enum import StrEnum


class Policy(StrEnum):
    """Available rate-limiting policies.

    DEBOUNCE: Waits for a quiet period of ``wait`` seconds after the last
              trigger, or fires on the first trigger of a burst when
              ``immediate`` is set.
    THROTTLE: Fires at most once per ``wait`` seconds, on the leading
              and/or trailing edge of a burst.
    """

    DEBOUNCE = "debounce"
    THROTTLE = "throttle"


@dataclass(frozen=True, slots=True)
class DebounceConfig:
    """Configuration for a Debouncer instance.

    Attributes:
        wait: Quiet-period length in seconds. Zero or negative values are
              accepted and make every trigger fire.
        immediate: Fire on the leading edge of a burst instead of the
                   trailing edge.
    """

    wait: float = 1.0
    immediate: bool = False

    @property
    def policy(self) -> Policy:
        return Policy.DEBOUNCE


@dataclass(frozen=True, slots=True)
class ThrottleConfig:
    """Configuration for a Throttler instance.

    Attributes:
        wait: Minimum spacing in seconds between executions.
        leading: Fire on the first trigger of a burst.
        trailing: Fire once more after the last trigger of a burst.
                  ``leading`` and ``trailing`` should not both be False.
    """

    wait: float = 1.0
    leading: bool = True
    trailing: bool = True

    @property
    def policy(self) -> Policy:
        return Policy.THROTTLE
