# room_calendar/errors.py
# Exceptions shared by the engine, the store adapters and the outer surfaces.
from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class InvalidConfiguration(Exception):
    """
    Raised when the static configuration cannot be used, e.g.:
        1. operating window with start >= end
        2. an hour bound outside [0, 24)
        3. an empty or duplicated room/staff list
    Fatal at startup.
    """
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ValidationError(Exception):
    """User-facing rejection of a reservation edit. The caller keeps the input for correction."""
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ReservationNotFound(Exception):
    room: str
    reservation_id: str

    def __str__(self) -> str:
        return f"Reservation {self.reservation_id} not found in {self.room}"


@dataclass(eq=False)
class StorageReadFailure(Exception):
    key: str
    reason: str

    def __str__(self) -> str:
        return f"Could not read {self.key}: {self.reason}"


@dataclass(eq=False)
class StorageWriteFailure(Exception):
    key: str
    reason: str

    def __str__(self) -> str:
        return f"Failed to save reservations ({self.key}): {self.reason}"
