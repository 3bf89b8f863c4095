# room_calendar/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from room_calendar.domain.timegrid import TimeGrid
from room_calendar.errors import InvalidConfiguration

ROOMS: Tuple[str, ...] = (
    "Sanctuary",
    "Social Hall",
    "The Studio on 3",
    "Youth Room",
    "Studio on 4",
    "Classroom",
    "Kitchen",
    "Parlor",
    "Podcast Room",
)

STAFF: Tuple[str, ...] = (
    "Jacqui Lewis",
    "Rev. Natalie Renee Perkins",
    "Macky Alston",
    "Rev. Amanda Hambrick Ashcraft",
    "Elise Tiralli",
    "John del Cueto",
    "Zayn D. Silva",
    "Michael Lennon",
    "Joseph Puma",
)

DATA_DIR_ENV = "ROOM_CALENDAR_DATA_DIR"


@dataclass(frozen=True)
class OperatingHours:
    """Daily window [start, end) in whole hours"""
    start: int = 7
    end: int = 22


@dataclass(frozen=True)
class ReservationDefaults:
    """
    Starting values of the booking form.
    meeting_name: empty
    staff_name: first configured staff member
    status: "inquiry" (a booking has to be confirmed explicitly)
    start_time / end_time: 09:00-10:00
    """
    meeting_name: str = ""
    staff_name: str = STAFF[0]
    status: str = "inquiry"
    start_time: str = "09:00"
    end_time: str = "10:00"

    def merged(self, *overrides: Optional[Mapping[str, Any]]) -> "ReservationDefaults":
        """Apply overrides left to right; None values and unknown keys are ignored."""
        names = {f.name for f in fields(self)}
        out = self
        for ov in overrides:
            if not ov:
                continue
            changes = {k: v for k, v in ov.items() if k in names and v is not None}
            out = replace(out, **changes)
        return out


@dataclass(frozen=True)
class StorageConfig:
    data_dir: str = "data"
    key_prefix: str = "reservations"  # key = "<prefix>:<room>"


@dataclass(frozen=True)
class AppConfig:
    rooms: Tuple[str, ...] = ROOMS
    staff: Tuple[str, ...] = STAFF
    hours: OperatingHours = OperatingHours()
    slot_minutes: int = 30

    # "today" for navigation
    timezone_name: str = "America/New_York"

    # overlapping reservations in one room are accepted and reported as warnings
    allow_overlap: bool = True

    defaults: ReservationDefaults = ReservationDefaults()
    storage: StorageConfig = StorageConfig()

    def time_grid(self) -> TimeGrid:
        return TimeGrid(start_hour=self.hours.start, end_hour=self.hours.end, slot_minutes=self.slot_minutes)


def validate_config(cfg: AppConfig) -> AppConfig:
    cfg.time_grid()  # raises InvalidConfiguration on a malformed window
    if not cfg.rooms:
        raise InvalidConfiguration("At least one room must be configured")
    if len(set(cfg.rooms)) != len(cfg.rooms):
        raise InvalidConfiguration("Room names must be unique")
    if len(set(cfg.staff)) != len(cfg.staff):
        raise InvalidConfiguration("Staff names must be unique")
    if cfg.staff and cfg.defaults.staff_name not in cfg.staff:
        raise InvalidConfiguration(f"Default staff member is not configured: {cfg.defaults.staff_name}")
    return cfg


def load_config(base: Optional[AppConfig] = None, environ: Optional[Dict[str, str]] = None) -> AppConfig:
    """DEFAULT_CONFIG (or base) with environment overrides applied, validated once at startup."""
    cfg = base or DEFAULT_CONFIG
    env = os.environ if environ is None else environ
    data_dir = env.get(DATA_DIR_ENV)
    if data_dir:
        cfg = replace(cfg, storage=replace(cfg.storage, data_dir=data_dir))
    return validate_config(cfg)


DEFAULT_CONFIG = AppConfig()
