from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional

from ...common.datetime_utils import hours_between, localize
from ...common.validators import require_positive_number
from ...core.constants import (
    BREAK_TIERS,
    NIGHT_PREMIUM_MULTIPLIER,
    OVERTIME_MULTIPLIER,
    STANDARD_SHIFT_HOURS,
)
from ...core.exceptions import ValidationError
from ..model import PayBreakdown
from .base import NightHoursPolicy, PayCalculator
from .night_policy import OvertimeCappedNightPolicy


def break_hours_for(total_hours: float) -> float:
    """Unpaid break deducted for a shift of ``total_hours`` elapsed time."""
    for threshold, break_hours in BREAK_TIERS:
        if total_hours >= threshold:
            return break_hours
    return 0.0


class CheckoutPayCalculator(PayCalculator):
    """Daily pay for one attendance record closed at ``check_out_time``.

    Rule set:
    - break: 1h from 8h elapsed, 0.5h from 4h, none below
    - overtime: break-adjusted hours beyond the 8h standard shift, paid x1.5
    - night: hours chosen by the night policy, premium x0.5 on top
    - base: at most 8h at the hourly rate

    The night check uses wall-clock time in ``tz``; the process timezone is never consulted.
    """

    def __init__(self, tz: tzinfo, *, night_policy: Optional[NightHoursPolicy] = None):
        self._tz = tz
        self._night_policy = night_policy or OvertimeCappedNightPolicy()

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def calculate(self, *, check_in_time: datetime, check_out_time: datetime, hourly_rate: float) -> PayBreakdown:
        rate = require_positive_number(hourly_rate, "hourly_rate")
        check_in = localize(check_in_time, self._tz)
        check_out = localize(check_out_time, self._tz)

        total_hours = hours_between(check_in, check_out)
        if total_hours <= 0:
            raise ValidationError("Check-out time must be after check-in time")

        break_hours = break_hours_for(total_hours)
        work_hours = max(0.0, total_hours - break_hours)
        overtime_hours = max(0.0, work_hours - STANDARD_SHIFT_HOURS)
        night_hours = self._night_policy.night_hours(
            check_in=check_in,
            check_out=check_out,
            overtime_hours=overtime_hours,
        )

        return PayBreakdown(
            total_hours=total_hours,
            break_hours=break_hours,
            work_hours=work_hours,
            overtime_hours=overtime_hours,
            night_hours=night_hours,
            hourly_rate=rate,
            base_pay=min(work_hours, STANDARD_SHIFT_HOURS) * rate,
            overtime_pay=overtime_hours * rate * OVERTIME_MULTIPLIER,
            night_pay=night_hours * rate * NIGHT_PREMIUM_MULTIPLIER,
        )
