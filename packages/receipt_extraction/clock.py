"""Time source used by the date fallback.

Production wiring uses the system clock; tests pass a fixed clock so the
whole pipeline stays deterministic.
"""

from datetime import date
from typing import Callable

Clock = Callable[[], date]


def system_clock() -> date:
    return date.today()


def fixed_clock(day: date) -> Clock:
    """Return a clock that always reports ``day``."""

    def _clock() -> date:
        return day

    return _clock
