"""Domain models and calendar arithmetic for datesugar.

This package contains the functional core:
- Pure functions with no side effects
- No clock reads, no I/O
- Easy to test
"""

from datesugar.domain.errors import InvalidArgumentError
from datesugar.domain.models import (
    DayOverflow,
    PluralRelativeDates,
    RelativeDates,
    SeparatedDate,
    SingularRelativeDates,
)

__all__ = [
    "DayOverflow",
    "InvalidArgumentError",
    "PluralRelativeDates",
    "RelativeDates",
    "SeparatedDate",
    "SingularRelativeDates",
]
