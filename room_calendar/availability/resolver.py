# room_calendar/availability/resolver.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Sequence, Union

from room_calendar.domain.models import (
    SLOT_STATUS_PRIORITY,
    STATUS_AVAILABLE,
    STATUS_BOOKED,
    STATUS_INQUIRY,
    CalendarCell,
    Reservation,
)
from room_calendar.domain.timegrid import TimeGrid, time_to_minutes


@dataclass(frozen=True)
class SlotResolution:
    status: str
    reservations: List[Reservation]


def covering(reservations: Iterable[Reservation], d: date, slot_time: str) -> List[Reservation]:
    """Every reservation covering the slot. Overlaps are legal, so this may be more than one."""
    slot = time_to_minutes(slot_time)
    return [r for r in reservations if r.covers(d, slot)]


def status_of(matches: Sequence[Reservation]) -> str:
    # booked wins over inquiry
    present = {r.status for r in matches}
    for status in SLOT_STATUS_PRIORITY:
        if status in present:
            return status
    return STATUS_AVAILABLE


def resolve_slot(reservations: Iterable[Reservation], d: date, slot_time: str) -> SlotResolution:
    matches = covering(reservations, d, slot_time)
    return SlotResolution(status=status_of(matches), reservations=matches)


def slot_status(reservations: Iterable[Reservation], d: date, slot_time: str) -> str:
    return resolve_slot(reservations, d, slot_time).status


def bucket_by_date(reservations: Iterable[Reservation]) -> Dict[date, List[Reservation]]:
    by: Dict[date, List[Reservation]] = {}
    for r in reservations:
        by.setdefault(r.date, []).append(r)
    for d in by:
        by[d].sort(key=lambda x: (x.start_minutes, x.end_minutes))
    return by


def build_cells(
    reservations: Iterable[Reservation],
    days: Sequence[date],
    grid: Union[TimeGrid, Sequence[str]],
) -> Dict[date, List[CalendarCell]]:
    """
    day -> one CalendarCell per slot, in slot order.
    Reservations are bucketed by date first; the result equals calling
    resolve_slot for every (day, slot).
    """
    labels = grid.labels() if isinstance(grid, TimeGrid) else list(grid)
    by_date = bucket_by_date(reservations)

    out: Dict[date, List[CalendarCell]] = {}
    for d in days:
        todays = by_date.get(d, [])
        cells = []
        for label in labels:
            res = resolve_slot(todays, d, label)
            cells.append(CalendarCell(day=d, slot_time=label, status=res.status, reservations=res.reservations))
        out[d] = cells
    return out


def day_summary(reservations: Iterable[Reservation], d: date) -> Dict[str, int]:
    """Counts per reservation status for a month-view cell."""
    counts = {STATUS_BOOKED: 0, STATUS_INQUIRY: 0}
    for r in reservations:
        if r.date == d and r.status in counts:
            counts[r.status] += 1
    return counts
