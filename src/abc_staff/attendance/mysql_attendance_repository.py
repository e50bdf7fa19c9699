from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import from_utc_naive, to_utc_naive
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, CheckoutUpdate
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, staff_id, store_id, work_date, status,
    check_in_time, check_out_time, scheduled_check_out_time,
    check_out_latitude, check_out_longitude,
    work_hours, break_hours, overtime_hours, night_hours,
    base_pay, overtime_pay, night_pay, daily_total, auto_checkout
"""


def _opt_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def _opt_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        staff_id=int(r["staff_id"]),
        store_id=_opt_int(r.get("store_id")),
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        check_in_time=from_utc_naive(r.get("check_in_time")),
        check_out_time=from_utc_naive(r.get("check_out_time")),
        scheduled_check_out_time=from_utc_naive(r.get("scheduled_check_out_time")),
        check_out_latitude=_opt_float(r.get("check_out_latitude")),
        check_out_longitude=_opt_float(r.get("check_out_longitude")),
        work_hours=_opt_float(r.get("work_hours")),
        break_hours=_opt_float(r.get("break_hours")),
        overtime_hours=_opt_float(r.get("overtime_hours")),
        night_hours=_opt_float(r.get("night_hours")),
        base_pay=_opt_int(r.get("base_pay")),
        overtime_pay=_opt_int(r.get("overtime_pay")),
        night_pay=_opt_int(r.get("night_pay")),
        daily_total=_opt_int(r.get("daily_total")),
        auto_checkout=bool(r.get("auto_checkout")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendances WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def close_checkout(self, update: CheckoutUpdate) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendances
                SET check_out_time=%s, status=%s,
                    check_out_latitude=%s, check_out_longitude=%s,
                    work_hours=%s, break_hours=%s, overtime_hours=%s, night_hours=%s,
                    base_pay=%s, overtime_pay=%s, night_pay=%s, daily_total=%s,
                    auto_checkout=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (
                    to_utc_naive(update.check_out_time),
                    update.status.value,
                    update.check_out_latitude,
                    update.check_out_longitude,
                    update.work_hours,
                    update.break_hours,
                    update.overtime_hours,
                    update.night_hours,
                    update.base_pay,
                    update.overtime_pay,
                    update.night_pay,
                    update.daily_total,
                    int(update.auto_checkout),
                    int(update.attendance_id),
                ),
            )
            if cur.rowcount == 0:
                return None

            # Same transaction, so the row read back is the one just written.
            cur.execute(f"SELECT {_COLUMNS} FROM attendances WHERE attendance_id=%s", (int(update.attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_open_before(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendances
                WHERE work_date < %s
                  AND check_in_time IS NOT NULL
                  AND check_out_time IS NULL
                ORDER BY work_date ASC, attendance_id ASC
                """,
                (work_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_open_on(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendances
                WHERE work_date = %s
                  AND check_in_time IS NOT NULL
                  AND check_out_time IS NULL
                  AND scheduled_check_out_time IS NOT NULL
                ORDER BY attendance_id ASC
                """,
                (work_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]
