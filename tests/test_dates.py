"""Tests for ledger.dates pure functions."""

from datetime import date

import pytest

from ledger.dates import (
    day_label,
    day_name,
    days_in_month,
    month_key,
    month_range,
    shift_month,
    week_label,
    week_start,
)
from ledger.domain.models import DateKey, MonthKey


class TestMonthRange:
    """Tests for month_range."""

    def test_january_range(self) -> None:
        """Should calculate range for January."""
        first, last, label = month_range(MonthKey("2025-01"))

        assert first == "2025-01-01"
        assert last == "2025-01-31"
        assert label == "January 2025"

    def test_february_non_leap_year(self) -> None:
        """Should handle February in non-leap year."""
        first, last, label = month_range(MonthKey("2025-02"))

        assert first == "2025-02-01"
        assert last == "2025-02-28"
        assert label == "February 2025"

    def test_february_leap_year(self) -> None:
        """Should handle February in leap year."""
        first, last, label = month_range(MonthKey("2024-02"))

        assert first == "2024-02-01"
        assert last == "2024-02-29"
        assert label == "February 2024"

    def test_thirty_day_month(self) -> None:
        """Should handle 30-day months."""
        _, last, _ = month_range(MonthKey("2025-04"))

        assert last == "2025-04-30"

    def test_invalid_month_format_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month format."""
        with pytest.raises(ValueError):
            month_range(MonthKey("invalid"))

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(ValueError):
            month_range(MonthKey("2025-13"))


class TestMonthKeys:
    """Tests for month key helpers."""

    def test_month_key_pads(self) -> None:
        assert month_key(2024, 3) == "2024-03"

    def test_days_in_month(self) -> None:
        assert days_in_month(MonthKey("2024-02")) == 29
        assert days_in_month(MonthKey("2023-02")) == 28
        assert days_in_month(MonthKey("2024-12")) == 31

    def test_shift_month_current(self) -> None:
        """Offset 0 is the month containing today."""
        assert shift_month(date(2024, 3, 15), 0) == "2024-03"

    def test_shift_month_crosses_year(self) -> None:
        """Should step back across year boundaries."""
        assert shift_month(date(2024, 3, 15), 3) == "2023-12"
        assert shift_month(date(2024, 3, 15), 15) == "2022-12"


class TestWeeks:
    """Tests for Sunday-based week helpers."""

    def test_week_start_midweek(self) -> None:
        """A Tuesday belongs to the week starting the previous Sunday."""
        assert week_start(date(2024, 3, 5)) == date(2024, 3, 3)

    def test_week_start_on_sunday(self) -> None:
        """A Sunday starts its own week."""
        assert week_start(date(2024, 3, 3)) == date(2024, 3, 3)

    def test_week_start_on_saturday(self) -> None:
        assert week_start(date(2024, 3, 9)) == date(2024, 3, 3)

    def test_week_start_with_offset(self) -> None:
        """Offset moves back whole weeks."""
        assert week_start(date(2024, 3, 5), 1) == date(2024, 2, 25)
        assert week_start(date(2024, 3, 5), 2) == date(2024, 2, 18)

    def test_day_name_sunday_first(self) -> None:
        assert day_name(date(2024, 3, 3)) == "Sun"
        assert day_name(date(2024, 3, 4)) == "Mon"
        assert day_name(date(2024, 3, 9)) == "Sat"

    def test_week_label(self) -> None:
        days = [DateKey(f"2024-03-{d:02d}") for d in range(3, 10)]
        assert week_label(days) == "Mar 3 – Mar 9"


class TestDayLabel:
    """Tests for day_label."""

    def test_today(self) -> None:
        assert day_label(date(2024, 3, 5), date(2024, 3, 5)) == "Today"

    def test_other_day(self) -> None:
        assert day_label(date(2024, 3, 5), date(2024, 3, 6)) == "Tue, Mar 5"
