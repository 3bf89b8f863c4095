# room_calendar/reporting/report.py
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

import pandas as pd

from room_calendar.availability.resolver import build_cells, bucket_by_date, day_summary
from room_calendar.domain.calendar_days import in_month, month_days, week_days
from room_calendar.domain.models import STATUS_BOOKED, STATUS_INQUIRY, Reservation
from room_calendar.domain.timegrid import TimeGrid

RESERVATION_COLUMNS = ["date", "start_time", "end_time", "room", "meeting_name", "staff_name", "status", "id"]


def build_slot_table(reservations: Iterable[Reservation], days: Sequence[date], grid: TimeGrid) -> pd.DataFrame:
    """Slot labels x dates, each cell the resolved slot status."""
    cells = build_cells(reservations, days, grid)
    data = {d.isoformat(): [c.status for c in cells[d]] for d in days}
    df = pd.DataFrame(data, index=grid.labels())
    df.index.name = "time"
    return df


def build_week_table(reservations: Iterable[Reservation], anchor: date, grid: TimeGrid) -> pd.DataFrame:
    return build_slot_table(reservations, week_days(anchor), grid)


def build_day_table(reservations: Iterable[Reservation], d: date, grid: TimeGrid) -> pd.DataFrame:
    """One row per slot: status plus the meetings occupying it."""
    rows = []
    for c in build_cells(reservations, [d], grid)[d]:
        rows.append(dict(
            time=c.slot_time,
            status=c.status,
            meetings=", ".join(r.meeting_name or "(untitled)" for r in c.reservations),
            staff=", ".join(r.staff_name for r in c.reservations),
        ))
    return pd.DataFrame(rows, columns=["time", "status", "meetings", "staff"])


def build_month_table(reservations: Iterable[Reservation], anchor: date) -> pd.DataFrame:
    """42 rows (6 weeks) with booked/inquiry counts and the out-of-month flag used for dimming."""
    by_date = bucket_by_date(reservations)
    rows = []
    for d in month_days(anchor):
        counts = day_summary(by_date.get(d, []), d)
        rows.append(dict(
            date=d.isoformat(),
            weekday=f"{d:%a}",
            in_month=in_month(d, anchor),
            booked=counts[STATUS_BOOKED],
            inquiry=counts[STATUS_INQUIRY],
        ))
    return pd.DataFrame(rows)


def build_reservation_table(reservations: Iterable[Reservation]) -> pd.DataFrame:
    rows: List[dict] = []
    for r in reservations:
        rows.append(dict(
            date=r.date.isoformat(),
            start_time=r.start_time,
            end_time=r.end_time,
            room=r.room,
            meeting_name=r.meeting_name,
            staff_name=r.staff_name,
            status=r.status,
            id=r.id,
            _start=r.start_minutes,
        ))
    df = pd.DataFrame(rows, columns=RESERVATION_COLUMNS + ["_start"])
    if not df.empty:
        df = df.sort_values(["date", "_start", "room"]).reset_index(drop=True)
    return df.drop(columns=["_start"])
