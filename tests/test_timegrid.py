"""
Tests for the half-hour time grid.
"""

from datetime import time

import pytest

from room_calendar.domain.timegrid import TimeGrid, generate_time_slots, minutes_to_label, time_to_minutes
from room_calendar.errors import InvalidConfiguration


class TestGenerateTimeSlots:
    """Tests for slot label generation."""

    def test_default_window(self):
        """07:00-22:00 gives 30 slots from 07:00 to 21:30."""
        slots = generate_time_slots(7, 22)
        assert len(slots) == 30
        assert slots[0] == "07:00"
        assert slots[1] == "07:30"
        assert slots[-1] == "21:30"

    def test_length_and_order_for_all_windows(self):
        """Length is 2*(end-start) and labels strictly increase in minutes."""
        for start in range(0, 24):
            for end in range(start + 1, 24):
                slots = generate_time_slots(start, end)
                assert len(slots) == 2 * (end - start)
                minutes = [time_to_minutes(s) for s in slots]
                assert all(a < b for a, b in zip(minutes, minutes[1:]))

    def test_deterministic(self):
        assert generate_time_slots(9, 12) == generate_time_slots(9, 12)

    @pytest.mark.parametrize("start,end", [(10, 10), (12, 9), (-1, 5), (5, 24), (24, 25)])
    def test_invalid_window(self, start, end):
        with pytest.raises(InvalidConfiguration):
            generate_time_slots(start, end)


class TestTimeConversion:
    """Tests for HH:MM <-> minutes."""

    def test_time_to_minutes(self):
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("09:30") == 570
        assert time_to_minutes("9:30") == 570
        assert time_to_minutes(time(21, 30)) == 1290

    def test_avoids_string_comparison(self):
        """'9:00' sorts after '10:00' as a string but not as minutes."""
        assert time_to_minutes("9:00") < time_to_minutes("10:00")

    @pytest.mark.parametrize("value", ["", "9", "24:00", "10:60", "ab:cd", "10:5"])
    def test_invalid_times(self, value):
        with pytest.raises(ValueError):
            time_to_minutes(value)

    def test_minutes_to_label(self):
        assert minutes_to_label(570) == "09:30"
        assert minutes_to_label(1320) == "22:00"


class TestTimeGrid:
    """Tests for TimeGrid helpers."""

    def test_labels_and_grid_alignment(self):
        grid = TimeGrid(start_hour=9, end_hour=11)
        assert grid.labels() == ["09:00", "09:30", "10:00", "10:30"]
        assert grid.slot_to_minutes(1) == 570
        assert grid.is_on_grid("10:30")
        assert not grid.is_on_grid("10:15")

    def test_invalid_slot_length(self):
        with pytest.raises(InvalidConfiguration):
            TimeGrid(start_hour=7, end_hour=22, slot_minutes=45)
