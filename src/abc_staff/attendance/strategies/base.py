from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class CheckoutStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide the status of a closed record."""

    @abstractmethod
    def decide_checkout(
        self,
        *,
        now: datetime,
        scheduled_check_out: Optional[datetime],
        current: AttendanceStatus,
    ) -> StatusDecision:
        raise NotImplementedError
