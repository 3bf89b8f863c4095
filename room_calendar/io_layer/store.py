# room_calendar/io_layer/store.py
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from room_calendar.domain.models import Reservation
from room_calendar.errors import StorageReadFailure, StorageWriteFailure
from room_calendar.io_layer.paths import StoragePaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadResult:
    """Either the stored reservations or the reason they could not be read."""
    reservations: List[Reservation] = field(default_factory=list)
    failure: Optional[StorageReadFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def encode_reservations(reservations: Sequence[Reservation]) -> str:
    return json.dumps([r.to_dict() for r in reservations], ensure_ascii=False)


def decode_reservations(raw: Optional[str]) -> List[Reservation]:
    if not raw:
        return []
    items = json.loads(raw)
    if not isinstance(items, list):
        raise ValueError("stored value is not a list")
    return [Reservation.from_dict(item) for item in items]


class ReservationStore:
    """
    Key-value persistence of a room's reservation list, partitioned by room.

    read()  -> ReadResult, never raises
    get()   -> list, a failed read is coerced to [] (indistinguishable from an unused room)
    save()  -> replaces the whole list, raises StorageWriteFailure
    """

    def __init__(self, key_prefix: str = "reservations"):
        self.key_prefix = key_prefix

    def key_for(self, room: str) -> str:
        return f"{self.key_prefix}:{room}"

    async def _load_raw(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def _store_raw(self, key: str, value: str) -> None:
        raise NotImplementedError

    async def read(self, room: str) -> ReadResult:
        key = self.key_for(room)
        try:
            raw = await self._load_raw(key)
            return ReadResult(reservations=decode_reservations(raw))
        except (OSError, ValueError, KeyError, TypeError) as e:
            return ReadResult(failure=StorageReadFailure(key=key, reason=str(e)))

    async def get(self, room: str) -> List[Reservation]:
        result = await self.read(room)
        if not result.ok:
            logger.warning("No reservations loaded for room %s: %s", room, result.failure)
            return []
        return result.reservations

    async def save(self, room: str, reservations: Sequence[Reservation]) -> None:
        key = self.key_for(room)
        try:
            await self._store_raw(key, encode_reservations(reservations))
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save reservations for room %s: %s", room, e)
            raise StorageWriteFailure(key=key, reason=str(e)) from e
        logger.debug("Saved %d reservations under %s", len(reservations), key)


class MemoryStore(ReservationStore):
    """Dict-backed store; values are kept serialized like the file store's."""

    def __init__(self, key_prefix: str = "reservations", data: Optional[Dict[str, str]] = None):
        super().__init__(key_prefix)
        self.data: Dict[str, str] = {} if data is None else data

    async def _load_raw(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def _store_raw(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore(ReservationStore):
    """One JSON file per room under the data directory. File I/O runs in a worker thread."""

    def __init__(self, paths: StoragePaths):
        super().__init__(paths.key_prefix)
        self.paths = paths

    def key_for(self, room: str) -> str:
        return self.paths.key_for(room)

    def _read_file(self, path: Path) -> Optional[str]:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write_file(self, path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)

    async def _load_raw(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read_file, self.paths.file_for(key))

    async def _store_raw(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write_file, self.paths.file_for(key), value)
