"""Pure calendar arithmetic for date shifting.

``datetime.date`` rejects out-of-range fields instead of normalizing them,
so carrying days into months and months into years is done here:
- No clock reads
- No side effects
- Every function takes and returns plain values
"""

import calendar
from datetime import date, timedelta

from datesugar.domain.models import DayOverflow


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (month is one-indexed)."""
    return calendar.monthrange(year, month)[1]


def _carry_month(year: int, month: int) -> tuple[int, int]:
    """Fold any integer month into 1..12, carrying whole years."""
    return year + (month - 1) // 12, (month - 1) % 12 + 1


def normalize(year: int, month: int, day: int) -> date:
    """Build a date from possibly out-of-range fields.

    Month 0 is December of the previous year, month 13 is January of the
    next. Day 0 is the last day of the previous month, and days past the end
    of the month roll into the following one.

    Args:
        year: Calendar year.
        month: Month, any integer.
        day: Day of month, any integer.

    Returns:
        The normalized date.

    Raises:
        OverflowError: If the result falls outside ``date.min``..``date.max``.
        ValueError: If the normalized year is outside the supported range.
    """
    year, month = _carry_month(year, month)
    return date(year, month, 1) + timedelta(days=day - 1)


def resolve(year: int, month: int, day: int, overflow: DayOverflow = DayOverflow.CLAMP) -> date:
    """Build a date after a month or year shift.

    The month is normalized first. A day past the end of the resulting month
    is then either clamped to its last day or rolled into the next month.

    Args:
        year: Calendar year.
        month: Month, any integer.
        day: Day of month carried over from the source date.
        overflow: Policy for days that don't exist in the target month.

    Returns:
        The resolved date.
    """
    year, month = _carry_month(year, month)
    if overflow is DayOverflow.CLAMP:
        day = min(day, days_in_month(year, month))
    return normalize(year, month, day)


def shift_days(value: date, days: int) -> date:
    """Move a date by a signed number of days."""
    return normalize(value.year, value.month, value.day + days)


def shift_months(value: date, months: int, overflow: DayOverflow = DayOverflow.CLAMP) -> date:
    """Move a date by a signed number of months, keeping the day where possible."""
    return resolve(value.year, value.month + months, value.day, overflow)


def shift_years(value: date, years: int, overflow: DayOverflow = DayOverflow.CLAMP) -> date:
    """Move a date by a signed number of years.

    Only Feb 29 can overflow: it becomes Feb 28 when clamped, Mar 1 when rolled.
    """
    return resolve(value.year + years, value.month, value.day, overflow)
