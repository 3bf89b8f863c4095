# room_calendar/domain/calendar_days.py
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List

from dateutil import tz
from dateutil.relativedelta import relativedelta

MONTH_GRID_DAYS = 42  # 6 full weeks
WEEK_DAYS = 7

VIEW_MONTH = "month"
VIEW_WEEK = "week"
VIEW_DAY = "day"
VIEW_MODES = (VIEW_MONTH, VIEW_WEEK, VIEW_DAY)


def day_of_week(d: date) -> int:
    """Sunday=0 ... Saturday=6"""
    return (d.weekday() + 1) % 7


def week_start(d: date) -> date:
    """The Sunday on or before d. Weeks always start on Sunday."""
    return d - timedelta(days=day_of_week(d))


def week_days(d: date) -> List[date]:
    start = week_start(d)
    return [start + timedelta(days=i) for i in range(WEEK_DAYS)]


def month_days(d: date) -> List[date]:
    """
    42 consecutive dates covering d's month, starting on the Sunday on or
    before the 1st. Leading/trailing dates of the neighbouring months are
    included; dimming them is up to the caller (see in_month).
    """
    start = week_start(d.replace(day=1))
    return [start + timedelta(days=i) for i in range(MONTH_GRID_DAYS)]


def view_days(d: date, view: str) -> List[date]:
    if view == VIEW_MONTH:
        return month_days(d)
    if view == VIEW_WEEK:
        return week_days(d)
    if view == VIEW_DAY:
        return [d]
    raise ValueError(f"Unknown view mode: {view!r}")


def in_month(d: date, reference: date) -> bool:
    return (d.year, d.month) == (reference.year, reference.month)


def shift_date(d: date, view: str, step: int) -> date:
    """Previous/next navigation: step=-1 or +1 moves one month, week or day."""
    if view == VIEW_MONTH:
        # 31 Jan + 1 month -> 28/29 Feb
        return d + relativedelta(months=step)
    if view == VIEW_WEEK:
        return d + timedelta(days=WEEK_DAYS * step)
    if view == VIEW_DAY:
        return d + timedelta(days=step)
    raise ValueError(f"Unknown view mode: {view!r}")


def date_label(d: date, view: str) -> str:
    if view == VIEW_MONTH:
        return f"{d:%B %Y}"
    if view == VIEW_DAY:
        return f"{d:%A, %B} {d.day}, {d.year}"
    if view == VIEW_WEEK:
        start = week_start(d)
        end = start + timedelta(days=WEEK_DAYS - 1)
        if start.month == end.month:
            return f"{d:%B %Y}"
        return f"{start:%b} - {end:%b %Y}"
    raise ValueError(f"Unknown view mode: {view!r}")


def today(timezone_name: str) -> date:
    return datetime.now(tz=tz.gettz(timezone_name)).date()
