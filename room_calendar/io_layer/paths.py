# room_calendar/io_layer/paths.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from room_calendar.config import StorageConfig


@dataclass(frozen=True)
class StoragePaths:
    """
    One JSON document per room.
    key: "reservations:<room>"
    file: <data_dir>/<url-quoted key>.json  (room names contain spaces)
    """
    data_dir: str
    key_prefix: str = "reservations"

    @classmethod
    def from_config(cls, storage: StorageConfig) -> "StoragePaths":
        return cls(data_dir=storage.data_dir, key_prefix=storage.key_prefix)

    def key_for(self, room: str) -> str:
        return f"{self.key_prefix}:{room}"

    def file_for(self, key: str) -> Path:
        return Path(self.data_dir) / f"{quote(key, safe='')}.json"
