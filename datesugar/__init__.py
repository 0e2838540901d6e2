"""Rails-style date helpers: today, yesterday, beginning_of_month, get(n)."""

from datesugar.clock import Clock, fixed_clock, system_clock
from datesugar.dates import (
    beginning_of_day,
    beginning_of_month,
    beginning_of_year,
    day,
    get,
    month,
    separate,
    today,
    year,
    yesterday,
)
from datesugar.domain import (
    DayOverflow,
    InvalidArgumentError,
    PluralRelativeDates,
    RelativeDates,
    SeparatedDate,
    SingularRelativeDates,
)

__all__ = [
    # Helpers
    "beginning_of_day",
    "beginning_of_month",
    "beginning_of_year",
    "day",
    "get",
    "month",
    "separate",
    "today",
    "year",
    "yesterday",
    # Clock
    "Clock",
    "fixed_clock",
    "system_clock",
    # Types
    "DayOverflow",
    "InvalidArgumentError",
    "PluralRelativeDates",
    "RelativeDates",
    "SeparatedDate",
    "SingularRelativeDates",
]
