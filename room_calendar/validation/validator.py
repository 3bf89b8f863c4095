# room_calendar/validation/validator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from room_calendar.config import AppConfig, ReservationDefaults
from room_calendar.domain.models import RESERVATION_STATUSES, Reservation, ReservationInput
from room_calendar.domain.timegrid import TimeGrid, time_to_minutes
from room_calendar.errors import ValidationError


@dataclass(frozen=True)
class ValidationWarning:
    message: str


def validate_time_range(start_time: str, end_time: str) -> None:
    try:
        start = time_to_minutes(start_time)
        end = time_to_minutes(end_time)
    except ValueError as e:
        raise ValidationError(str(e)) from e
    if end <= start:
        raise ValidationError("End time must be after start time.")


def _validate_times_on_grid(start_time: str, end_time: str, grid: TimeGrid) -> None:
    if not grid.is_on_grid(start_time) or not grid.is_on_grid(end_time):
        raise ValidationError(f"Times must be on the {grid.slot_minutes}-minute grid.")
    start = time_to_minutes(start_time)
    end = time_to_minutes(end_time)
    if start < grid.window_start_minutes or end > grid.window_end_minutes:
        raise ValidationError(
            f"Reservations must fall between {grid.start_hour:02d}:00 and {grid.end_hour:02d}:00."
        )


def resolve_input(data: ReservationInput, defaults: ReservationDefaults) -> ReservationDefaults:
    """Form defaults merged with whatever the caller filled in."""
    return defaults.merged(dict(
        meeting_name=data.meeting_name,
        staff_name=data.staff_name,
        status=data.status,
        start_time=data.start_time,
        end_time=data.end_time,
    ))


def validate_reservation_input(data: ReservationInput, cfg: AppConfig) -> ReservationDefaults:
    """
    Check a create/update request and return the merged form values.
    Raises ValidationError with a message meant for the user.
    """
    values = resolve_input(data, cfg.defaults)

    if data.room not in cfg.rooms:
        raise ValidationError(f"Unknown room: {data.room}")
    if cfg.staff and values.staff_name not in cfg.staff:
        raise ValidationError(f"Unknown staff member: {values.staff_name}")
    if values.status not in RESERVATION_STATUSES:
        raise ValidationError(f"Status must be one of {', '.join(RESERVATION_STATUSES)}: {values.status}")

    validate_time_range(values.start_time, values.end_time)
    _validate_times_on_grid(values.start_time, values.end_time, cfg.time_grid())
    return values


def find_overlaps(candidate: Reservation, existing: Iterable[Reservation]) -> List[Reservation]:
    return [r for r in existing if r.id != candidate.id and r.overlaps(candidate)]


def check_overlaps(
    candidate: Reservation,
    existing: Iterable[Reservation],
    allow_overlap: bool = True,
) -> List[ValidationWarning]:
    """
    Same-room overlaps are legal by default (inquiries may sit next to bookings)
    and come back as warnings; with allow_overlap=False they are rejected.
    """
    clashes = find_overlaps(candidate, existing)
    if clashes and not allow_overlap:
        first = clashes[0]
        raise ValidationError(
            f"{candidate.room} is already reserved {first.start_time}-{first.end_time} "
            f"on {first.date.isoformat()} ({first.meeting_name or 'untitled'})."
        )
    return [
        ValidationWarning(
            f"Overlaps {r.status} reservation {r.id} {r.start_time}-{r.end_time} "
            f"in {r.room} on {r.date.isoformat()}"
        )
        for r in clashes
    ]
