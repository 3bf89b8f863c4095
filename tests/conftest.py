"""
Pytest configuration and fixtures.
Tests run against an in-memory store or a temporary directory, never the real data dir.
"""

import asyncio
from datetime import date
from itertools import count

import pytest

from room_calendar.config import DEFAULT_CONFIG
from room_calendar.domain.models import Reservation
from room_calendar.io_layer.store import MemoryStore
from room_calendar.lifecycle.manager import ReservationManager


@pytest.fixture
def cfg():
    return DEFAULT_CONFIG


@pytest.fixture
def grid(cfg):
    return cfg.time_grid()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def manager(store, cfg):
    """Manager with predictable ids: r1, r2, ..."""
    ids = count(1)
    return ReservationManager(store, cfg, id_factory=lambda: f"r{next(ids)}")


@pytest.fixture
def run():
    """Drive a coroutine to completion."""
    return asyncio.run


def make_reservation(rid="x1", day=date(2024, 3, 1), start="09:00", end="10:00",
                     status="booked", room="Sanctuary", name="Choir", staff="Jacqui Lewis"):
    return Reservation(id=rid, room=room, meeting_name=name, staff_name=staff,
                       status=status, date=day, start_time=start, end_time=end)


@pytest.fixture
def reservation_factory():
    return make_reservation
