from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import PayBreakdown


class NightHoursPolicy(ABC):
    """Decides how many hours earn the night premium (Strategy Pattern).

    Both datetimes are already expressed as wall-clock time in the pay timezone.
    """

    @abstractmethod
    def night_hours(self, *, check_in: datetime, check_out: datetime, overtime_hours: float) -> float:
        raise NotImplementedError


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, *, check_in_time: datetime, check_out_time: datetime, hourly_rate: float) -> PayBreakdown:
        raise NotImplementedError
