# room_calendar/gui/app.py
# streamlit run room_calendar/gui/app.py
from __future__ import annotations

import asyncio
from datetime import date
from typing import List, Optional, Tuple

import streamlit as st

from room_calendar.config import load_config
from room_calendar.domain.calendar_days import (
    VIEW_DAY,
    VIEW_MODES,
    VIEW_MONTH,
    VIEW_WEEK,
    date_label,
    shift_date,
    today,
    view_days,
)
from room_calendar.domain.models import RESERVATION_STATUSES, ReservationInput
from room_calendar.domain.timegrid import TimeGrid
from room_calendar.errors import InvalidConfiguration, ReservationNotFound, StorageWriteFailure, ValidationError
from room_calendar.io_layer.paths import StoragePaths
from room_calendar.io_layer.store import JsonFileStore
from room_calendar.lifecycle.manager import ReservationManager
from room_calendar.reporting.export_xlsx import export_calendar_bytes
from room_calendar.reporting.report import (
    build_day_table,
    build_month_table,
    build_reservation_table,
    build_week_table,
)

NOTICES_KEY = "notices"

STATUS_COLORS = {
    "booked": "background-color: #ef4444; color: white",
    "inquiry": "background-color: #fbbf24",
    "available": "background-color: #ecfdf5",
}


def _color_status(value):
    return STATUS_COLORS.get(value, "")


def queue_notices(state, warnings, success: str) -> None:
    state[NOTICES_KEY] = dict(warnings=[w.message for w in warnings], success=success)


def pop_notices(state) -> Tuple[List[str], Optional[str]]:
    """Warnings and success message queued by the previous run, cleared once read."""
    notices = state.pop(NOTICES_KEY, None) or {}
    return list(notices.get("warnings", [])), notices.get("success")


def _show_notices() -> None:
    warnings, success = pop_notices(st.session_state)
    for message in warnings:
        st.warning(message)
    if success:
        st.success(success)


def _navigation(cfg, view: str) -> date:
    if "current_date" not in st.session_state:
        st.session_state.current_date = today(cfg.timezone_name)

    prev_col, label_col, today_col, next_col = st.columns([1, 4, 1, 1])
    if prev_col.button("<", key="prev"):
        st.session_state.current_date = shift_date(st.session_state.current_date, view, -1)
    if today_col.button("Today", key="today"):
        st.session_state.current_date = today(cfg.timezone_name)
    if next_col.button(">", key="next"):
        st.session_state.current_date = shift_date(st.session_state.current_date, view, 1)
    label_col.markdown(f"**{date_label(st.session_state.current_date, view)}**")
    return st.session_state.current_date


def _reservation_form(cfg, grid: TimeGrid, manager: ReservationManager, room: str, reservations, current: date):
    labels = grid.labels() + [f"{grid.end_hour:02d}:00"]
    editing = {r.id: r for r in reservations}

    st.subheader("Reservation")
    choice = st.selectbox(
        "Edit existing",
        ["(new reservation)"] + list(editing),
        format_func=lambda rid: rid if rid not in editing else
        f"{editing[rid].date} {editing[rid].start_time}-{editing[rid].end_time} {editing[rid].meeting_name}",
    )
    existing = editing.get(choice)
    base = cfg.defaults.merged(existing and dict(
        meeting_name=existing.meeting_name,
        staff_name=existing.staff_name,
        status=existing.status,
        start_time=existing.start_time,
        end_time=existing.end_time,
    ))

    with st.form("reservation"):
        meeting_name = st.text_input("Meeting name", value=base.meeting_name)
        staff_name = st.selectbox("Staff", cfg.staff, index=cfg.staff.index(base.staff_name))
        status = st.radio("Status", RESERVATION_STATUSES, index=RESERVATION_STATUSES.index(base.status),
                          horizontal=True)
        day = st.date_input("Date", value=existing.date if existing else current)
        start_time = st.selectbox("Start", labels[:-1], index=labels.index(base.start_time))
        end_time = st.selectbox("End", labels[1:], index=labels[1:].index(base.end_time))
        save = st.form_submit_button("Save")
        delete = st.form_submit_button("Delete", disabled=existing is None)

    data = ReservationInput(room=room, date=day, meeting_name=meeting_name, staff_name=staff_name,
                            status=status, start_time=start_time, end_time=end_time)
    try:
        if save:
            if existing:
                asyncio.run(manager.update(existing.id, data))
            else:
                asyncio.run(manager.create(data))
            # shown after the rerun, which would clear anything written now
            queue_notices(st.session_state, manager.last_warnings, "Saved.")
            st.rerun()
        if delete and existing:
            asyncio.run(manager.delete(room, existing.id))
            queue_notices(st.session_state, [], "Deleted.")
            st.rerun()
    except ValidationError as e:
        st.error(e.message)
    except (ReservationNotFound, StorageWriteFailure) as e:
        st.error(f"Failed to save reservation. {e}")


def main():
    st.set_page_config(page_title="Room Reservations", layout="wide")
    try:
        cfg = load_config()
    except InvalidConfiguration as e:
        st.error(e.message)
        st.stop()

    grid = cfg.time_grid()
    manager = ReservationManager(JsonFileStore(StoragePaths.from_config(cfg.storage)), cfg)

    st.title("Room Reservations")
    st.caption("Booked / Inquiry / Available")
    _show_notices()

    with st.sidebar:
        room = st.selectbox("Select Space", cfg.rooms)
        view = st.radio("View", VIEW_MODES, index=VIEW_MODES.index(VIEW_WEEK), horizontal=True)

    current = _navigation(cfg, view)
    reservations = asyncio.run(manager.list(room))

    if view == VIEW_MONTH:
        df = build_month_table(reservations, current)
        st.dataframe(df, use_container_width=True)
    elif view == VIEW_WEEK:
        df = build_week_table(reservations, current, grid)
        st.dataframe(df.style.map(_color_status), use_container_width=True, height=800)
    else:
        df = build_day_table(reservations, current, grid)
        st.dataframe(df.style.map(_color_status, subset=["status"]), use_container_width=True, height=800)

    shown = set(view_days(current, view))
    res_df = build_reservation_table([r for r in reservations if r.date in shown])
    st.download_button(
        label="Download xlsx",
        data=export_calendar_bytes(df, res_df),
        file_name=f"{room}-{current.isoformat()}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

    with st.sidebar:
        _reservation_form(cfg, grid, manager, room, reservations, current)

    if view == VIEW_DAY:
        st.subheader("Reservations")
        st.dataframe(res_df, use_container_width=True)


if __name__ == "__main__":
    main()
