from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from .strategies.base import CheckoutStatusStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class CheckoutStrategyFactory:
    """Factory Pattern: choose the checkout status strategy."""

    def for_checkout(
        self,
        *,
        now: datetime,
        scheduled_check_out: Optional[datetime],
        current_status: AttendanceStatus,
    ) -> CheckoutStatusStrategy:
        if scheduled_check_out is not None and now < scheduled_check_out:
            return EarlyLeaveStrategy()
        return NormalStrategy()
