from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from abc_staff.attendance.model import AttendanceRecord, CheckoutUpdate
from abc_staff.container import build_services
from abc_staff.core.enums import AttendanceStatus
from abc_staff.stores.model import Store


class InMemoryStores:
    def __init__(self, stores: Optional[dict[int, Store]] = None):
        self.stores = dict(stores or {})

    def get_by_id(self, store_id: int) -> Optional[Store]:
        return self.stores.get(store_id)


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self.writes: list[CheckoutUpdate] = []
        self.lose_next_write = False
        self.fail_ids: set[int] = set()
        self._id = 0

    def add(
        self,
        *,
        check_in_time: Optional[datetime],
        status: AttendanceStatus = AttendanceStatus.CHECKED_IN,
        store_id: Optional[int] = 1,
        scheduled_check_out_time: Optional[datetime] = None,
        work_date: Optional[date] = None,
        staff_id: int = 7,
    ) -> AttendanceRecord:
        self._id += 1
        rec = AttendanceRecord(
            attendance_id=self._id,
            staff_id=staff_id,
            store_id=store_id,
            work_date=work_date or (check_in_time.date() if check_in_time else date(2025, 3, 3)),
            status=status,
            check_in_time=check_in_time,
            scheduled_check_out_time=scheduled_check_out_time,
        )
        self.records[rec.attendance_id] = rec
        return rec

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(attendance_id)

    def close_checkout(self, update: CheckoutUpdate) -> Optional[AttendanceRecord]:
        # The MySQL repository stores UTC and rejects naive timestamps.
        assert update.check_out_time.tzinfo is not None
        self.writes.append(update)
        if update.attendance_id in self.fail_ids:
            raise RuntimeError("connection lost")
        rec = self.records.get(update.attendance_id)
        if rec is None or rec.check_out_time is not None or self.lose_next_write:
            self.lose_next_write = False
            return None
        closed = replace(
            rec,
            check_out_time=update.check_out_time,
            status=update.status,
            check_out_latitude=update.check_out_latitude,
            check_out_longitude=update.check_out_longitude,
            work_hours=update.work_hours,
            break_hours=update.break_hours,
            overtime_hours=update.overtime_hours,
            night_hours=update.night_hours,
            base_pay=update.base_pay,
            overtime_pay=update.overtime_pay,
            night_pay=update.night_pay,
            daily_total=update.daily_total,
            auto_checkout=update.auto_checkout,
        )
        self.records[rec.attendance_id] = closed
        return closed

    def list_open_before(self, work_date: date):
        items = [
            r
            for r in self.records.values()
            if r.work_date < work_date and r.check_in_time is not None and r.check_out_time is None
        ]
        items.sort(key=lambda r: (r.work_date, r.attendance_id))
        return items

    def list_open_on(self, work_date: date):
        items = [
            r
            for r in self.records.values()
            if r.work_date == work_date
            and r.check_in_time is not None
            and r.check_out_time is None
            and r.scheduled_check_out_time is not None
        ]
        items.sort(key=lambda r: r.attendance_id)
        return items


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def stores_repo() -> InMemoryStores:
    return InMemoryStores({1: Store(store_id=1, name="Gangnam", default_hourly_rate=10000)})


@pytest.fixture
def container(attendance_repo, stores_repo):
    return build_services(attendance_repo=attendance_repo, stores_repo=stores_repo, timezone_name="Asia/Seoul")
