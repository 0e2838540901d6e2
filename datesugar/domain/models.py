"""Domain type definitions for datesugar.

- SeparatedDate: the (day, month, year) triple of a calendar date
- SingularRelativeDates / PluralRelativeDates: result of ``get(n)``
- DayOverflow: what to do with a day that doesn't exist in the target month
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Literal


class DayOverflow(str, Enum):
    """Policy for a day-of-month past the end of the target month."""

    # Mar 31 - 1 month -> Feb 28 (or 29)
    CLAMP = "clamp"
    # Mar 31 - 1 month -> Mar 3 (or 2)
    ROLL = "roll"


@dataclass(frozen=True)
class SeparatedDate:
    """Immutable day/month/year snapshot. Months are one-indexed."""

    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, value: date) -> "SeparatedDate":
        return cls(day=value.day, month=value.month, year=value.year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class SingularRelativeDates:
    """Dates one day, one month and one year in the past."""

    day_ago: date
    month_ago: date
    year_ago: date
    kind: Literal["singular"] = field(default="singular", init=False)

    def as_dates(self) -> tuple[date, date, date]:
        return self.day_ago, self.month_ago, self.year_ago


@dataclass(frozen=True)
class PluralRelativeDates:
    """Dates n days, n months and n years in the past (n > 1)."""

    days_ago: date
    months_ago: date
    years_ago: date
    kind: Literal["plural"] = field(default="plural", init=False)

    def as_dates(self) -> tuple[date, date, date]:
        return self.days_ago, self.months_ago, self.years_ago


RelativeDates = SingularRelativeDates | PluralRelativeDates
