# room_calendar/lifecycle/manager.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional
from uuid import uuid4

from room_calendar.config import AppConfig
from room_calendar.domain.models import Reservation, ReservationInput
from room_calendar.errors import ReservationNotFound
from room_calendar.io_layer.store import ReservationStore
from room_calendar.validation.validator import (
    ValidationWarning,
    check_overlaps,
    validate_reservation_input,
)

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return uuid4().hex


class ReservationManager:
    """
    Create/update/delete against one store. Each call reads the room's full
    list, changes a copy and writes the full list back.

    No locking: at most one mutation per room may be in flight, callers
    serialize (e.g. disable the save button while a save is pending).
    """

    def __init__(
        self,
        store: ReservationStore,
        cfg: AppConfig,
        id_factory: Callable[[], str] = generate_id,
    ):
        self.store = store
        self.cfg = cfg
        self.id_factory = id_factory
        self.last_warnings: List[ValidationWarning] = []

    async def list(self, room: str) -> List[Reservation]:
        return await self.store.get(room)

    async def get(self, room: str, reservation_id: str) -> Optional[Reservation]:
        for r in await self.store.get(room):
            if r.id == reservation_id:
                return r
        return None

    def _build(self, reservation_id: str, data: ReservationInput) -> Reservation:
        values = validate_reservation_input(data, self.cfg)
        return Reservation(
            id=reservation_id,
            room=data.room,
            meeting_name=values.meeting_name,
            staff_name=values.staff_name,
            status=values.status,
            date=data.date,
            start_time=values.start_time,
            end_time=values.end_time,
        )

    def _check_overlaps(self, candidate: Reservation, existing: List[Reservation]) -> None:
        self.last_warnings = check_overlaps(candidate, existing, allow_overlap=self.cfg.allow_overlap)
        for w in self.last_warnings:
            logger.warning("%s: %s", candidate.id, w.message)

    async def create(self, data: ReservationInput) -> Reservation:
        self.last_warnings = []
        # validate before touching the store so a rejected edit persists nothing
        reservation = self._build(self.id_factory(), data)
        current = await self.store.get(data.room)
        self._check_overlaps(reservation, current)

        await self.store.save(data.room, current + [reservation])
        logger.info("Created %s reservation %s in %s on %s %s-%s", reservation.status, reservation.id,
                    reservation.room, reservation.date.isoformat(), reservation.start_time, reservation.end_time)
        return reservation

    async def update(self, reservation_id: str, data: ReservationInput) -> Reservation:
        self.last_warnings = []
        reservation = self._build(reservation_id, data)
        current = await self.store.get(data.room)
        idx = _index_of(current, reservation_id)
        if idx is None:
            raise ReservationNotFound(room=data.room, reservation_id=reservation_id)
        self._check_overlaps(reservation, current)

        updated = list(current)
        updated[idx] = reservation
        await self.store.save(data.room, updated)
        logger.info("Updated reservation %s in %s", reservation_id, data.room)
        return reservation

    async def delete(self, room: str, reservation_id: str) -> bool:
        """Remove a reservation. An unknown id is a no-op and returns False."""
        self.last_warnings = []
        current = await self.store.get(room)
        remaining = [r for r in current if r.id != reservation_id]
        if len(remaining) == len(current):
            logger.debug("Delete of unknown reservation %s in %s ignored", reservation_id, room)
            return False
        await self.store.save(room, remaining)
        logger.info("Deleted reservation %s from %s", reservation_id, room)
        return True


def _index_of(reservations: List[Reservation], reservation_id: str) -> Optional[int]:
    for i, r in enumerate(reservations):
        if r.id == reservation_id:
            return i
    return None

