from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, CheckoutUpdate


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def close_checkout(self, update: CheckoutUpdate) -> Optional[AttendanceRecord]:
        """Apply ``update`` only if the row is still open.

        Returns the closed record, or None when no open row matched (missing or
        already checked out). Must be a single atomic conditional write.
        """

        raise NotImplementedError

    def list_open_before(self, work_date: date) -> Sequence[AttendanceRecord]:
        """Checked-in records without a check-out whose work date is before ``work_date``."""

        raise NotImplementedError

    def list_open_on(self, work_date: date) -> Sequence[AttendanceRecord]:
        """Checked-in records without a check-out on ``work_date`` that have a scheduled check-out."""

        raise NotImplementedError
