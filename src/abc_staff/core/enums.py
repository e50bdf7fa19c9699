from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    SCHEDULED = "SCHEDULED"
    CHECKED_IN = "CHECKED_IN"
    COMPLETED = "COMPLETED"
    EARLY_LEAVE = "EARLY_LEAVE"
    LATE = "LATE"

    @property
    def is_open(self) -> bool:
        """True while the employee is on shift and can still check out."""
        return self in (AttendanceStatus.CHECKED_IN, AttendanceStatus.LATE)
