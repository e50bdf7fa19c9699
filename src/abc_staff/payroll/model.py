from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


def round_currency(amount: float) -> int:
    """Round a currency amount half-up to whole units."""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class StoredPay:
    """Currency fields in the integer form written to the attendance row."""

    base_pay: int
    overtime_pay: int
    night_pay: int
    daily_total: int


@dataclass(frozen=True)
class PayBreakdown:
    """Result of the checkout pay computation (full precision)."""

    total_hours: float
    break_hours: float
    work_hours: float
    overtime_hours: float
    night_hours: float
    hourly_rate: float
    base_pay: float
    overtime_pay: float
    night_pay: float

    @property
    def daily_total(self) -> float:
        return self.base_pay + self.overtime_pay + self.night_pay

    def stored_pay(self) -> StoredPay:
        # daily_total is summed after rounding so the stored identity holds.
        base = round_currency(self.base_pay)
        overtime = round_currency(self.overtime_pay)
        night = round_currency(self.night_pay)
        return StoredPay(base_pay=base, overtime_pay=overtime, night_pay=night, daily_total=base + overtime + night)
