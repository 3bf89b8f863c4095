# room_calendar/reporting/export_xlsx.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd


def _write_sheets(target: Union[str, BinaryIO], calendar_df: pd.DataFrame, reservation_df: pd.DataFrame,
                  calendar_sheet: str) -> None:
    with pd.ExcelWriter(target, engine="openpyxl") as w:
        # slot tables carry the time labels in the index
        calendar_df.to_excel(w, sheet_name=calendar_sheet, index=calendar_df.index.name is not None)
        reservation_df.to_excel(w, sheet_name="reservations", index=False)


def export_calendar_xlsx(
    out_path: str,
    calendar_df: pd.DataFrame,
    reservation_df: pd.DataFrame,
    calendar_sheet: str = "calendar",
) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    _write_sheets(out_path, calendar_df, reservation_df, calendar_sheet)
    return out_path


def export_calendar_bytes(
    calendar_df: pd.DataFrame,
    reservation_df: pd.DataFrame,
    calendar_sheet: str = "calendar",
) -> bytes:
    """In-memory xlsx for download buttons."""
    buf = BytesIO()
    _write_sheets(buf, calendar_df, reservation_df, calendar_sheet)
    return buf.getvalue()
