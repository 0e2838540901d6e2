"""Current-moment sources.

Every anchor function reads "now" through a ``Clock`` so callers and tests can
pin it to a literal date.
"""

from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    def __call__(self) -> date: ...


def system_clock() -> datetime:
    """Return the local wall-clock time."""
    return datetime.now()


def fixed_clock(value: date) -> Clock:
    """Return a clock that always reports ``value``."""

    def _clock() -> date:
        return value

    return _clock
