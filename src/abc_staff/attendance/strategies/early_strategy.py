from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import CheckoutStatusStrategy, StatusDecision


class EarlyLeaveStrategy(CheckoutStatusStrategy):
    """Checkout before the scheduled check-out time."""

    def decide_checkout(
        self,
        *,
        now: datetime,
        scheduled_check_out: Optional[datetime],
        current: AttendanceStatus,
    ) -> StatusDecision:
        note = None
        if scheduled_check_out is not None:
            minutes = int((scheduled_check_out - now).total_seconds() // 60)
            note = f"Left {minutes} min before scheduled check-out"
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE, note=note)
