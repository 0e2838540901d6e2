"""Tests for datesugar.domain.models."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from datesugar.domain.models import DayOverflow, PluralRelativeDates, SeparatedDate, SingularRelativeDates


class TestSeparatedDate:
    """Tests for SeparatedDate."""

    def test_is_immutable(self) -> None:
        """Should reject attribute assignment."""
        parts = SeparatedDate(day=1, month=2, year=2003)
        with pytest.raises(FrozenInstanceError):
            parts.day = 5  # type: ignore[misc]

    def test_to_date(self) -> None:
        """Should rebuild the calendar date."""
        assert SeparatedDate(day=1, month=2, year=2003).to_date() == date(2003, 2, 1)

    def test_to_date_rejects_invalid_fields(self) -> None:
        """Should not normalize on its own."""
        with pytest.raises(ValueError):
            SeparatedDate(day=30, month=2, year=2003).to_date()


class TestRelativeDates:
    """Tests for the singular and plural result records."""

    def test_kind_tags(self) -> None:
        """Each variant should carry its own tag."""
        d = date(2020, 1, 1)
        assert SingularRelativeDates(d, d, d).kind == "singular"
        assert PluralRelativeDates(d, d, d).kind == "plural"

    def test_same_values_compare_by_tuple(self) -> None:
        """as_dates should ignore the labels."""
        a, b, c = date(2020, 1, 1), date(2020, 2, 1), date(2020, 3, 1)
        assert SingularRelativeDates(a, b, c).as_dates() == PluralRelativeDates(a, b, c).as_dates()

    def test_variants_are_not_equal(self) -> None:
        """Records of different variants should never compare equal."""
        d = date(2020, 1, 1)
        assert SingularRelativeDates(d, d, d) != PluralRelativeDates(d, d, d)

    def test_kind_not_settable(self) -> None:
        """The tag should always match the variant."""
        d = date(2020, 1, 1)
        with pytest.raises(TypeError):
            SingularRelativeDates(d, d, d, kind="plural")  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            PluralRelativeDates(d, d, d, kind="singular")  # type: ignore[call-arg]


class TestDayOverflow:
    """Tests for DayOverflow."""

    def test_values(self) -> None:
        """Should parse from the config strings."""
        assert DayOverflow("clamp") is DayOverflow.CLAMP
        assert DayOverflow("roll") is DayOverflow.ROLL
