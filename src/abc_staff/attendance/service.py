from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import localize, now_utc
from ..common.validators import optional_coordinate
from ..core.constants import AUTO_CHECKOUT_FALLBACK_HOURS, AUTO_CHECKOUT_GRACE_HOURS
from ..core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from ..payroll.calculator.checkout_calculator import CheckoutPayCalculator
from ..payroll.service import HourlyRateResolver
from .factory import CheckoutStrategyFactory
from .model import AttendanceRecord, CheckoutUpdate
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass
class AutoCheckoutResult:
    processed: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "processed": len(self.processed),
            "attendance_ids": list(self.processed),
            "skipped": list(self.skipped),
            "errors": list(self.errors),
        }


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        rates: HourlyRateResolver,
        *,
        calculator: CheckoutPayCalculator,
        strategy_factory: Optional[CheckoutStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._rates = rates
        self._calculator = calculator
        self._factory = strategy_factory or CheckoutStrategyFactory()

    def get_record(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def check_out(
        self,
        attendance_id: int,
        *,
        now: Optional[datetime] = None,
        latitude=None,
        longitude=None,
    ) -> AttendanceRecord:
        now = now or now_utc()
        lat = optional_coordinate(latitude, "latitude", limit=90)
        lng = optional_coordinate(longitude, "longitude", limit=180)

        record = self.get_record(attendance_id)
        if record.is_closed:
            raise ConflictError("Already checked out")

        closed = self._close(record, check_out_time=now, latitude=lat, longitude=lng, auto_checkout=False)
        logger.info(
            "Attendance %s checked out: status=%s work_hours=%.2f daily_total=%s",
            closed.attendance_id,
            closed.status.value,
            closed.work_hours or 0.0,
            closed.daily_total,
        )
        return closed

    def auto_checkout_pending(self, *, now: Optional[datetime] = None) -> AutoCheckoutResult:
        """Close records the employee forgot to check out of.

        Two sweeps, both in the service timezone:
        - records from earlier work dates close at the scheduled check-out when
          it falls after check-in, otherwise at check-in plus the fallback shift length
        - today's records close at the scheduled check-out once the grace
          period after it has passed

        A checkout instant later than ``now`` is left for a later run.
        """
        tz = self._calculator.tz
        now = localize(now or now_utc(), tz)
        today = now.date()
        result = AutoCheckoutResult()

        for record in self._attendance.list_open_before(today):
            self._auto_close(record, self._past_checkout_time(record), now=now, result=result)

        grace = timedelta(hours=AUTO_CHECKOUT_GRACE_HOURS)
        for record in self._attendance.list_open_on(today):
            scheduled = record.scheduled_check_out_time
            if scheduled is None or record.check_in_time is None:
                continue
            scheduled = localize(scheduled, tz)
            if scheduled <= localize(record.check_in_time, tz) or now < scheduled + grace:
                continue
            self._auto_close(record, scheduled, now=now, result=result)

        logger.info(
            "Auto checkout closed %d record(s), skipped %d, %d error(s)",
            len(result.processed),
            len(result.skipped),
            len(result.errors),
        )
        return result

    def _past_checkout_time(self, record: AttendanceRecord) -> Optional[datetime]:
        if record.check_in_time is None:
            return None
        scheduled = record.scheduled_check_out_time
        if scheduled is not None and scheduled > record.check_in_time:
            return scheduled
        return record.check_in_time + timedelta(hours=AUTO_CHECKOUT_FALLBACK_HOURS)

    def _auto_close(
        self,
        record: AttendanceRecord,
        check_out_time: Optional[datetime],
        *,
        now: datetime,
        result: AutoCheckoutResult,
    ) -> None:
        if check_out_time is None:
            result.errors.append(f"{record.attendance_id}: Not checked in")
            return

        check_out_time = localize(check_out_time, self._calculator.tz)
        if check_out_time > now:
            logger.info("Auto checkout deferred attendance %s until %s", record.attendance_id, check_out_time)
            result.skipped.append(record.attendance_id)
            return

        try:
            closed = self._close(
                record,
                check_out_time=check_out_time,
                latitude=None,
                longitude=None,
                auto_checkout=True,
            )
        except DomainError as exc:
            logger.warning("Auto checkout skipped attendance %s: %s", record.attendance_id, exc)
            result.errors.append(f"{record.attendance_id}: {exc}")
            return
        except Exception as exc:
            logger.exception("Auto checkout failed for attendance %s", record.attendance_id)
            result.errors.append(f"{record.attendance_id}: {exc}")
            return
        result.processed.append(closed.attendance_id)

    def _close(
        self,
        record: AttendanceRecord,
        *,
        check_out_time: datetime,
        latitude: Optional[float],
        longitude: Optional[float],
        auto_checkout: bool,
    ) -> AttendanceRecord:
        if record.check_in_time is None or not record.status.is_open:
            raise ValidationError("Not checked in")

        tz = self._calculator.tz
        # Naive input is wall-clock time in the service timezone; repositories get aware values.
        check_out_time = localize(check_out_time, tz)

        rate = self._rates.resolve(record.store_id)
        breakdown = self._calculator.calculate(
            check_in_time=record.check_in_time,
            check_out_time=check_out_time,
            hourly_rate=rate,
        )

        scheduled = record.scheduled_check_out_time
        scheduled_local = localize(scheduled, tz) if scheduled is not None else None
        strategy = self._factory.for_checkout(
            now=check_out_time,
            scheduled_check_out=scheduled_local,
            current_status=record.status,
        )
        decision = strategy.decide_checkout(now=check_out_time, scheduled_check_out=scheduled_local, current=record.status)
        if decision.note:
            logger.info("Attendance %s: %s", record.attendance_id, decision.note)

        update = CheckoutUpdate.from_breakdown(
            attendance_id=record.attendance_id,
            check_out_time=check_out_time,
            status=decision.status,
            breakdown=breakdown,
            latitude=latitude,
            longitude=longitude,
            auto_checkout=auto_checkout,
        )
        closed = self._attendance.close_checkout(update)
        if closed is None:
            # Another request closed the row between our read and the conditional write.
            logger.warning("Concurrent checkout lost for attendance %s", record.attendance_id)
            raise ConflictError("Already checked out")
        return closed
