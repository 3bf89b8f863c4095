# main_cli.py
from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import date

from room_calendar.config import load_config
from room_calendar.domain.calendar_days import VIEW_MODES, VIEW_MONTH, VIEW_WEEK, date_label, today, view_days
from room_calendar.domain.models import ReservationInput
from room_calendar.errors import InvalidConfiguration, ReservationNotFound, StorageWriteFailure, ValidationError
from room_calendar.io_layer.paths import StoragePaths
from room_calendar.io_layer.store import JsonFileStore
from room_calendar.lifecycle.manager import ReservationManager
from room_calendar.reporting.export_xlsx import export_calendar_xlsx
from room_calendar.reporting.report import (
    build_day_table,
    build_month_table,
    build_reservation_table,
    build_week_table,
)


def _date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD: {value}")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Room reservation calendar")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--data-dir", help="reservation storage directory (default: config / ROOM_CALENDAR_DATA_DIR)")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("slots", help="list the half-hour slots of the operating window")

    days = sub.add_parser("days", help="list the dates of a month/week/day view")
    days.add_argument("--view", choices=VIEW_MODES, default=VIEW_MONTH)
    days.add_argument("--date", type=_date, help="any date in the target period (default: today)")

    show = sub.add_parser("show", help="print a room's calendar")
    show.add_argument("--room", required=True)
    show.add_argument("--view", choices=VIEW_MODES, default=VIEW_WEEK)
    show.add_argument("--date", type=_date)

    book = sub.add_parser("book", help="create a reservation")
    book.add_argument("--room", required=True)
    book.add_argument("--date", type=_date, required=True)
    book.add_argument("--start", help="HH:MM")
    book.add_argument("--end", help="HH:MM")
    book.add_argument("--name", help="meeting name")
    book.add_argument("--staff")
    book.add_argument("--status", choices=("booked", "inquiry"))

    edit = sub.add_parser("edit", help="update a reservation")
    edit.add_argument("--room", required=True)
    edit.add_argument("--id", required=True)
    edit.add_argument("--date", type=_date)
    edit.add_argument("--start")
    edit.add_argument("--end")
    edit.add_argument("--name")
    edit.add_argument("--staff")
    edit.add_argument("--status", choices=("booked", "inquiry"))

    cancel = sub.add_parser("cancel", help="delete a reservation")
    cancel.add_argument("--room", required=True)
    cancel.add_argument("--id", required=True)

    export = sub.add_parser("export", help="write a room's calendar to xlsx")
    export.add_argument("--room", required=True)
    export.add_argument("--view", choices=(VIEW_MONTH, VIEW_WEEK), default=VIEW_WEEK)
    export.add_argument("--date", type=_date)
    export.add_argument("--out", default="output/calendar.xlsx", help="output xlsx")
    return p.parse_args(argv)


async def _run(args, cfg, manager: ReservationManager) -> int:
    grid = cfg.time_grid()
    anchor = getattr(args, "date", None) or today(cfg.timezone_name)

    if args.command == "slots":
        for label in grid.labels():
            print(label)
        return 0

    if args.command == "days":
        print(date_label(anchor, args.view))
        for d in view_days(anchor, args.view):
            print(f"{d.isoformat()} {d:%a}")
        return 0

    if getattr(args, "room", None) not in cfg.rooms:
        print(f"[ERROR] Unknown room: {args.room} (choose from: {', '.join(cfg.rooms)})")
        return 1

    if args.command == "show":
        reservations = await manager.list(args.room)
        print(f"{args.room} - {date_label(anchor, args.view)}")
        if args.view == VIEW_MONTH:
            df = build_month_table(reservations, anchor)
        elif args.view == VIEW_WEEK:
            df = build_week_table(reservations, anchor, grid)
        else:
            df = build_day_table(reservations, anchor, grid)
        print(df.to_string())
        return 0

    if args.command == "book":
        created = await manager.create(ReservationInput(
            room=args.room, date=args.date, meeting_name=args.name, staff_name=args.staff,
            status=args.status, start_time=args.start, end_time=args.end,
        ))
        for w in manager.last_warnings:
            print(f"[WARN] {w.message}")
        print(f"[RESULT] created {created.id}")
        return 0

    if args.command == "edit":
        existing = await manager.get(args.room, args.id)
        if existing is None:
            raise ReservationNotFound(room=args.room, reservation_id=args.id)
        updated = await manager.update(args.id, ReservationInput(
            room=args.room,
            date=args.date or existing.date,
            meeting_name=args.name if args.name is not None else existing.meeting_name,
            staff_name=args.staff or existing.staff_name,
            status=args.status or existing.status,
            start_time=args.start or existing.start_time,
            end_time=args.end or existing.end_time,
        ))
        for w in manager.last_warnings:
            print(f"[WARN] {w.message}")
        print(f"[RESULT] updated {updated.id}")
        return 0

    if args.command == "cancel":
        removed = await manager.delete(args.room, args.id)
        print(f"[RESULT] {'deleted' if removed else 'nothing to delete for'} {args.id}")
        return 0

    if args.command == "export":
        reservations = await manager.list(args.room)
        if args.view == VIEW_MONTH:
            cal_df = build_month_table(reservations, anchor)
        else:
            cal_df = build_week_table(reservations, anchor, grid)
        shown = set(view_days(anchor, args.view))
        res_df = build_reservation_table([r for r in reservations if r.date in shown])
        out_path = export_calendar_xlsx(args.out, cal_df, res_df)
        print(f"[RESULT] OK: {out_path}")
        return 0

    return 1


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config()
    except InvalidConfiguration as e:
        print(f"[ERROR] {e.message}")
        return 1

    paths = StoragePaths.from_config(cfg.storage)
    if args.data_dir:
        paths = StoragePaths(data_dir=args.data_dir, key_prefix=paths.key_prefix)
    manager = ReservationManager(JsonFileStore(paths), cfg)

    try:
        return asyncio.run(_run(args, cfg, manager))
    except ValidationError as e:
        print(f"[ERROR] {e.message}")
        return 1
    except (ReservationNotFound, StorageWriteFailure) as e:
        print(f"[ERROR] {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
