"""
Tests for month/week/day date enumeration and navigation.
"""

from datetime import date, timedelta

import pytest

from room_calendar.domain.calendar_days import (
    date_label,
    day_of_week,
    in_month,
    month_days,
    shift_date,
    view_days,
    week_days,
    week_start,
)

SAMPLE_DATES = [date(2024, 1, 1) + timedelta(days=i) for i in range(0, 800, 3)]


class TestMonthDays:
    """Tests for the 42-cell month grid."""

    def test_march_2024(self):
        """1 March 2024 is a Friday, so the grid starts on Sunday 25 February."""
        days = month_days(date(2024, 3, 15))
        assert len(days) == 42
        assert days[0] == date(2024, 2, 25)
        assert days[-1] == date(2024, 4, 6)

    def test_month_starting_on_sunday(self):
        """September 2024 starts on a Sunday: no leading days."""
        assert month_days(date(2024, 9, 30))[0] == date(2024, 9, 1)

    def test_properties(self):
        """Starts on Sunday, contiguous, contains the input date."""
        for d in SAMPLE_DATES:
            days = month_days(d)
            assert len(days) == 42
            assert day_of_week(days[0]) == 0
            assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))
            assert d in days

    def test_input_not_mutated(self):
        d = date(2024, 3, 15)
        month_days(d)
        assert d == date(2024, 3, 15)


class TestWeekDays:
    """Tests for the 7-cell week."""

    def test_week_of_friday(self):
        days = week_days(date(2024, 3, 1))
        assert days[0] == date(2024, 2, 25)
        assert days[-1] == date(2024, 3, 2)

    def test_sunday_is_its_own_week_start(self):
        assert week_start(date(2024, 3, 3)) == date(2024, 3, 3)

    def test_properties(self):
        for d in SAMPLE_DATES:
            days = week_days(d)
            assert len(days) == 7
            assert day_of_week(days[0]) == 0
            assert days[0] <= d <= days[0] + timedelta(days=6)


class TestViewHelpers:
    """Tests for view selection, month membership and navigation."""

    def test_view_days(self):
        d = date(2024, 3, 1)
        assert view_days(d, "day") == [d]
        assert len(view_days(d, "week")) == 7
        assert len(view_days(d, "month")) == 42
        with pytest.raises(ValueError):
            view_days(d, "year")

    def test_in_month(self):
        assert in_month(date(2024, 3, 31), date(2024, 3, 1))
        assert not in_month(date(2024, 2, 29), date(2024, 3, 1))

    def test_shift_month_clamps_day(self):
        assert shift_date(date(2024, 1, 31), "month", 1) == date(2024, 2, 29)
        assert shift_date(date(2024, 3, 31), "month", -1) == date(2024, 2, 29)

    def test_shift_week_and_day(self):
        assert shift_date(date(2024, 3, 1), "week", -1) == date(2024, 2, 23)
        assert shift_date(date(2024, 12, 31), "day", 1) == date(2025, 1, 1)


class TestDateLabel:
    """Tests for the navigation header label."""

    def test_month_label(self):
        assert date_label(date(2024, 3, 15), "month") == "March 2024"

    def test_day_label(self):
        assert date_label(date(2024, 3, 1), "day") == "Friday, March 1, 2024"

    def test_week_within_one_month(self):
        assert date_label(date(2024, 3, 13), "week") == "March 2024"

    def test_week_across_months(self):
        assert date_label(date(2024, 3, 1), "week") == "Feb - Mar 2024"
        assert date_label(date(2024, 12, 31), "week") == "Dec - Jan 2025"
