from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..core.enums import AttendanceStatus
from ..payroll.model import PayBreakdown, StoredPay


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one staff member's attendance for one work date."""

    attendance_id: int
    staff_id: int
    store_id: Optional[int]
    work_date: date
    status: AttendanceStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    scheduled_check_out_time: Optional[datetime] = None
    check_out_latitude: Optional[float] = None
    check_out_longitude: Optional[float] = None
    work_hours: Optional[float] = None
    break_hours: Optional[float] = None
    overtime_hours: Optional[float] = None
    night_hours: Optional[float] = None
    base_pay: Optional[int] = None
    overtime_pay: Optional[int] = None
    night_pay: Optional[int] = None
    daily_total: Optional[int] = None
    auto_checkout: bool = False

    @property
    def is_closed(self) -> bool:
        return self.check_out_time is not None

    def to_dict(self) -> dict[str, Any]:
        def iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            "id": self.attendance_id,
            "staff_id": self.staff_id,
            "store_id": self.store_id,
            "work_date": self.work_date.isoformat(),
            "status": self.status.value,
            "check_in_time": iso(self.check_in_time),
            "check_out_time": iso(self.check_out_time),
            "scheduled_check_out_time": iso(self.scheduled_check_out_time),
            "check_out_latitude": self.check_out_latitude,
            "check_out_longitude": self.check_out_longitude,
            "work_hours": self.work_hours,
            "break_hours": self.break_hours,
            "overtime_hours": self.overtime_hours,
            "night_hours": self.night_hours,
            "base_pay": self.base_pay,
            "overtime_pay": self.overtime_pay,
            "night_pay": self.night_pay,
            "daily_total": self.daily_total,
            "auto_checkout": self.auto_checkout,
        }


@dataclass(frozen=True)
class CheckoutUpdate:
    """Everything written to an open attendance row when it is closed."""

    attendance_id: int
    check_out_time: datetime
    status: AttendanceStatus
    work_hours: float
    break_hours: float
    overtime_hours: float
    night_hours: float
    base_pay: int
    overtime_pay: int
    night_pay: int
    daily_total: int
    check_out_latitude: Optional[float] = None
    check_out_longitude: Optional[float] = None
    auto_checkout: bool = False

    @classmethod
    def from_breakdown(
        cls,
        *,
        attendance_id: int,
        check_out_time: datetime,
        status: AttendanceStatus,
        breakdown: PayBreakdown,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        auto_checkout: bool = False,
    ) -> "CheckoutUpdate":
        pay: StoredPay = breakdown.stored_pay()
        return cls(
            attendance_id=attendance_id,
            check_out_time=check_out_time,
            status=status,
            work_hours=breakdown.work_hours,
            break_hours=breakdown.break_hours,
            overtime_hours=breakdown.overtime_hours,
            night_hours=breakdown.night_hours,
            base_pay=pay.base_pay,
            overtime_pay=pay.overtime_pay,
            night_pay=pay.night_pay,
            daily_total=pay.daily_total,
            check_out_latitude=latitude,
            check_out_longitude=longitude,
            auto_checkout=auto_checkout,
        )
