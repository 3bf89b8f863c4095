# room_calendar/domain/timegrid.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import List, Union

from room_calendar.errors import InvalidConfiguration


def time_to_minutes(value: Union[str, time]) -> int:
    """"HH:MM" or a time -> minutes since midnight. Times are never compared as strings."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    hh, sep, mm = str(value).strip().partition(":")
    if not sep or not hh.isdigit() or not mm.isdigit() or len(mm) != 2:
        raise ValueError(f"Invalid time: {value!r} (expected HH:MM)")
    h, m = int(hh), int(mm)
    if not (0 <= h < 24 and 0 <= m < 60):
        raise ValueError(f"Invalid time: {value!r} (expected HH:MM)")
    return h * 60 + m


def minutes_to_label(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class TimeGrid:
    """Half-hour slots over the operating window [start_hour, end_hour)."""
    start_hour: int = 7
    end_hour: int = 22
    slot_minutes: int = 30

    def __post_init__(self):
        for bound in (self.start_hour, self.end_hour):
            if not (0 <= bound < 24):
                raise InvalidConfiguration(f"Operating hour out of range [0, 24): {bound}")
        if self.start_hour >= self.end_hour:
            raise InvalidConfiguration(
                f"Operating window start ({self.start_hour}) must be before end ({self.end_hour})"
            )
        if self.slot_minutes <= 0 or 60 % self.slot_minutes != 0:
            raise InvalidConfiguration(f"Slot length must divide an hour: {self.slot_minutes}")

    @property
    def slots_per_day(self) -> int:
        return (self.end_hour - self.start_hour) * 60 // self.slot_minutes

    @property
    def window_start_minutes(self) -> int:
        return self.start_hour * 60

    @property
    def window_end_minutes(self) -> int:
        return self.end_hour * 60

    def slot_to_minutes(self, slot: int) -> int:
        return self.window_start_minutes + slot * self.slot_minutes

    def slot_label(self, slot: int) -> str:
        return minutes_to_label(self.slot_to_minutes(slot))

    def is_on_grid(self, value: Union[str, time]) -> bool:
        return (time_to_minutes(value) - self.window_start_minutes) % self.slot_minutes == 0

    def labels(self) -> List[str]:
        return [self.slot_label(s) for s in range(self.slots_per_day)]


def generate_time_slots(start_hour: int, end_hour: int) -> List[str]:
    """
    ["07:00", "07:30", ..., "21:30"] for start_hour=7, end_hour=22.
    Always 2 * (end_hour - start_hour) labels.
    """
    return TimeGrid(start_hour=start_hour, end_hour=end_hour).labels()
