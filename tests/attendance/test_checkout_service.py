from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from abc_staff.core.enums import AttendanceStatus
from abc_staff.core.exceptions import ConflictError, NotFoundError, ValidationError

SEOUL = ZoneInfo("Asia/Seoul")


def test_checkout_closes_record_with_pay_breakdown(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0))

    closed = container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 20, 0))

    assert closed.check_out_time == datetime(2025, 3, 3, 20, 0, tzinfo=SEOUL)
    assert closed.status == AttendanceStatus.COMPLETED
    assert closed.break_hours == 1
    assert closed.work_hours == 10
    assert closed.overtime_hours == 2
    assert closed.night_hours == 0
    assert closed.base_pay == 80000
    assert closed.overtime_pay == 30000
    assert closed.night_pay == 0
    assert closed.daily_total == 110000
    assert closed.auto_checkout is False


def test_checkout_before_schedule_is_early_leave(container, attendance_repo):
    rec = attendance_repo.add(
        check_in_time=datetime(2025, 3, 3, 9, 0),
        scheduled_check_out_time=datetime(2025, 3, 3, 18, 0),
    )

    closed = container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 17, 0))

    assert closed.status == AttendanceStatus.EARLY_LEAVE
    assert closed.work_hours == 7


def test_checkout_on_schedule_keeps_late_status(container, attendance_repo):
    rec = attendance_repo.add(
        check_in_time=datetime(2025, 3, 3, 9, 20),
        status=AttendanceStatus.LATE,
        scheduled_check_out_time=datetime(2025, 3, 3, 18, 0),
    )

    closed = container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 5))

    assert closed.status == AttendanceStatus.LATE


def test_checkout_twice_is_conflict_and_keeps_fields(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0))
    first = container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 0))
    writes = len(attendance_repo.writes)

    with pytest.raises(ConflictError):
        container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 23, 0))

    assert attendance_repo.get_by_id(rec.attendance_id) == first
    assert len(attendance_repo.writes) == writes


def test_lost_conditional_write_is_conflict(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0))
    attendance_repo.lose_next_write = True

    with pytest.raises(ConflictError):
        container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 0))

    assert attendance_repo.get_by_id(rec.attendance_id).check_out_time is None


def test_checkout_unknown_record_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.check_out(999, now=datetime(2025, 3, 3, 18, 0))


def test_checkout_without_checkin_is_rejected(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=None, status=AttendanceStatus.SCHEDULED)

    with pytest.raises(ValidationError):
        container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 0))


def test_checkout_before_checkin_writes_nothing(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0))

    with pytest.raises(ValidationError):
        container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 8, 0))

    assert attendance_repo.writes == []


def test_checkout_stores_geolocation(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0))

    closed = container.attendance_service.check_out(
        rec.attendance_id,
        now=datetime(2025, 3, 3, 18, 0),
        latitude="37.4979",
        longitude=127.0276,
    )

    assert closed.check_out_latitude == pytest.approx(37.4979)
    assert closed.check_out_longitude == pytest.approx(127.0276)
    assert closed.daily_total == 80000


@pytest.mark.parametrize("lat, lng", [(91, 0), (0, -181), ("north", 0), (True, 0)])
def test_checkout_rejects_bad_geolocation(container, attendance_repo, lat, lng):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0))

    with pytest.raises(ValidationError):
        container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 0), latitude=lat, longitude=lng)


def test_checkout_uses_default_rate_without_store(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 9, 0), store_id=None)

    closed = container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 0))

    assert closed.base_pay == 8 * 9860


def test_naive_checkout_time_is_stored_as_service_wall_clock(container, attendance_repo):
    rec = attendance_repo.add(check_in_time=datetime(2025, 3, 3, 0, 0, tzinfo=timezone.utc))

    closed = container.attendance_service.check_out(rec.attendance_id, now=datetime(2025, 3, 3, 18, 0))

    update = attendance_repo.writes[-1]
    assert update.check_out_time.tzinfo is not None
    assert update.check_out_time == datetime(2025, 3, 3, 9, 0, tzinfo=timezone.utc)
    assert closed.work_hours == 8
