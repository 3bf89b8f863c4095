"""
Tests for reservation input validation and the overlap policy.
"""

from datetime import date

import pytest

from room_calendar.domain.models import ReservationInput
from room_calendar.errors import ValidationError
from room_calendar.validation.validator import (
    check_overlaps,
    validate_reservation_input,
    validate_time_range,
)

DAY = date(2024, 3, 1)


class TestValidateTimeRange:
    """Tests for the end-after-start rule."""

    def test_valid(self):
        validate_time_range("09:00", "10:00")
        validate_time_range("9:30", "10:00")

    def test_end_before_start(self):
        with pytest.raises(ValidationError) as exc:
            validate_time_range("10:00", "09:00")
        assert exc.value.message == "End time must be after start time."

    def test_equal_times(self):
        with pytest.raises(ValidationError):
            validate_time_range("10:00", "10:00")

    def test_unparseable(self):
        with pytest.raises(ValidationError):
            validate_time_range("ten", "11:00")


class TestValidateReservationInput:
    """Tests for full input checks."""

    def test_defaults_fill_missing_fields(self, cfg):
        values = validate_reservation_input(ReservationInput(room="Sanctuary", date=DAY), cfg)
        assert values.status == "inquiry"
        assert values.staff_name == cfg.staff[0]
        assert (values.start_time, values.end_time) == ("09:00", "10:00")
        assert values.meeting_name == ""

    def test_overrides_win(self, cfg):
        values = validate_reservation_input(
            ReservationInput(room="Kitchen", date=DAY, status="booked", start_time="21:00", end_time="22:00"),
            cfg,
        )
        assert values.status == "booked"
        assert values.end_time == "22:00"

    @pytest.mark.parametrize("kwargs", [
        dict(room="Attic"),
        dict(room="Sanctuary", staff_name="Nobody"),
        dict(room="Sanctuary", status="cancelled"),
        dict(room="Sanctuary", start_time="09:15", end_time="10:00"),
        dict(room="Sanctuary", start_time="06:30", end_time="07:30"),
        dict(room="Sanctuary", start_time="21:30", end_time="22:30"),
        dict(room="Sanctuary", start_time="10:00", end_time="09:00"),
    ])
    def test_rejected(self, cfg, kwargs):
        with pytest.raises(ValidationError):
            validate_reservation_input(ReservationInput(date=DAY, **kwargs), cfg)


class TestCheckOverlaps:
    """Tests for the same-room overlap policy."""

    def test_overlap_is_a_warning_by_default(self, reservation_factory):
        existing = [reservation_factory(rid="a", start="09:00", end="10:00")]
        candidate = reservation_factory(rid="b", status="inquiry", start="09:30", end="10:30")
        warnings = check_overlaps(candidate, existing)
        assert len(warnings) == 1
        assert "a" in warnings[0].message

    def test_adjacent_is_not_an_overlap(self, reservation_factory):
        existing = [reservation_factory(rid="a", start="09:00", end="10:00")]
        candidate = reservation_factory(rid="b", start="10:00", end="11:00")
        assert check_overlaps(candidate, existing, allow_overlap=False) == []

    def test_same_id_ignored(self, reservation_factory):
        """An update does not clash with its own previous version."""
        existing = [reservation_factory(rid="a")]
        assert check_overlaps(reservation_factory(rid="a"), existing, allow_overlap=False) == []

    def test_guard_rejects_overlap(self, reservation_factory):
        existing = [reservation_factory(rid="a", start="09:00", end="10:00")]
        candidate = reservation_factory(rid="b", start="09:30", end="10:30")
        with pytest.raises(ValidationError):
            check_overlaps(candidate, existing, allow_overlap=False)
