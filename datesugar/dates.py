"""Rails-style date conveniences for datesugar.

Every helper is a pure transform on the (day, month, year) fields of a date.
Functions that need "now" take a keyword-only ``clock`` and read it once.
"""

import logging
from datetime import date

from datesugar.clock import Clock, system_clock
from datesugar.domain.date_math import shift_days, shift_months, shift_years
from datesugar.domain.errors import InvalidArgumentError
from datesugar.domain.models import (
    DayOverflow,
    PluralRelativeDates,
    RelativeDates,
    SeparatedDate,
    SingularRelativeDates,
)

logger = logging.getLogger(__name__)


def separate(value: date | None = None, *, clock: Clock = system_clock) -> SeparatedDate:
    """Split a date into its day, month and year.

    Args:
        value: Date or datetime to split. If None, the clock is read.
        clock: Source of the current moment.

    Returns:
        SeparatedDate with the time of day discarded.
    """
    if value is None:
        value = clock()
        logger.debug("Read current moment: %s", value)
    return SeparatedDate.from_date(value)


def day(value: date) -> int:
    """Day of month of ``value``."""
    return separate(value).day


def month(value: date) -> int:
    """Month of ``value`` (January is 1)."""
    return separate(value).month


def year(value: date) -> int:
    """Year of ``value``."""
    return separate(value).year


def today(*, clock: Clock = system_clock) -> date:
    """Current date with no time-of-day component."""
    return separate(clock=clock).to_date()


def beginning_of_day(*, clock: Clock = system_clock) -> date:
    """Same as ``today``."""
    return today(clock=clock)


def yesterday(*, clock: Clock = system_clock) -> date:
    """The day before today, crossing month and year boundaries."""
    return shift_days(today(clock=clock), -1)


def beginning_of_month(*, clock: Clock = system_clock) -> date:
    """First day of the current month."""
    current = separate(clock=clock)
    return date(current.year, current.month, 1)


def beginning_of_year(*, clock: Clock = system_clock) -> date:
    """January 1st of the current year."""
    current = separate(clock=clock)
    return date(current.year, 1, 1)


def get(
    n: int,
    *,
    clock: Clock = system_clock,
    overflow: DayOverflow = DayOverflow.CLAMP,
) -> RelativeDates:
    """Compute the dates ``n`` days, months and years before today.

    Args:
        n: Offset, must be at least 1.
        clock: Source of the current moment.
        overflow: What to do when the current day doesn't exist in the
            target month (e.g. Mar 31 one month back, Feb 29 one year back).

    Returns:
        SingularRelativeDates when n is 1, PluralRelativeDates otherwise.

    Raises:
        TypeError: If n is not an integer.
        InvalidArgumentError: If n is less than 1.
        ValueError: If a computed date falls before year 1.
        OverflowError: If a day offset reaches past ``date.min``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Offset must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgumentError()

    current = today(clock=clock)
    day_axis = shift_days(current, -n)
    month_axis = shift_months(current, -n, overflow)
    year_axis = shift_years(current, -n, overflow)
    logger.debug("get(%d) from %s: %s, %s, %s", n, current, day_axis, month_axis, year_axis)

    if n == 1:
        return SingularRelativeDates(day_ago=day_axis, month_ago=month_axis, year_ago=year_axis)
    return PluralRelativeDates(days_ago=day_axis, months_ago=month_axis, years_ago=year_axis)
