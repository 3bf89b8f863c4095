# room_calendar/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from room_calendar.domain.timegrid import time_to_minutes

STATUS_BOOKED = "booked"
STATUS_INQUIRY = "inquiry"
STATUS_AVAILABLE = "available"

# booked is rendered with priority over inquiry
RESERVATION_STATUSES = (STATUS_BOOKED, STATUS_INQUIRY)
SLOT_STATUS_PRIORITY = (STATUS_BOOKED, STATUS_INQUIRY, STATUS_AVAILABLE)


@dataclass(frozen=True)
class ReservationInput:
    """Form values for create/update. Unset fields fall back to ReservationDefaults."""
    room: str
    date: date
    meeting_name: Optional[str] = None
    staff_name: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass
class Reservation:
    id: str
    room: str
    meeting_name: str
    staff_name: str
    status: str
    date: date
    start_time: str
    end_time: str

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    def covers(self, d: date, slot_minutes: int) -> bool:
        """Half-open [start, end): a reservation ending at 10:00 does not cover 10:00."""
        return self.date == d and self.start_minutes <= slot_minutes < self.end_minutes

    def overlaps(self, other: "Reservation") -> bool:
        return (
            self.date == other.date
            and self.start_minutes < other.end_minutes
            and other.start_minutes < self.end_minutes
        )

    def to_dict(self) -> Dict[str, Any]:
        # persisted keys follow the stored JSON layout
        return {
            "id": self.id,
            "room": self.room,
            "meetingName": self.meeting_name,
            "staffName": self.staff_name,
            "status": self.status,
            "date": self.date.isoformat(),
            "startTime": self.start_time,
            "endTime": self.end_time,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Reservation":
        start_time = str(raw["startTime"])
        end_time = str(raw["endTime"])
        # a malformed time fails the whole read instead of every later render
        time_to_minutes(start_time)
        time_to_minutes(end_time)
        return cls(
            id=str(raw["id"]),
            room=str(raw["room"]),
            meeting_name=str(raw.get("meetingName", "")),
            staff_name=str(raw.get("staffName", "")),
            status=str(raw.get("status", STATUS_INQUIRY)),
            date=date.fromisoformat(str(raw["date"])[:10]),
            start_time=start_time,
            end_time=end_time,
        )


@dataclass(frozen=True)
class CalendarCell:
    """View-model for one (date, slot) cell. Recomputed on every render, never persisted."""
    day: date
    slot_time: str
    status: str
    reservations: List[Reservation] = field(default_factory=list)
