from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import CheckoutStatusStrategy, StatusDecision


class NormalStrategy(CheckoutStatusStrategy):
    """Checkout on or after schedule: keep the check-in classification."""

    def decide_checkout(
        self,
        *,
        now: datetime,
        scheduled_check_out: Optional[datetime],
        current: AttendanceStatus,
    ) -> StatusDecision:
        if current == AttendanceStatus.CHECKED_IN:
            return StatusDecision(status=AttendanceStatus.COMPLETED)
        return StatusDecision(status=current)
