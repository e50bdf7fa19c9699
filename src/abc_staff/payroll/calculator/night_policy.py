from __future__ import annotations

from datetime import datetime, time, timedelta

from ...common.datetime_utils import hours_between
from ...core.constants import NIGHT_END_HOUR, NIGHT_HOURS_CAP, NIGHT_START_HOUR
from .base import NightHoursPolicy


def is_night_hour(hour: int, *, start_hour: int = NIGHT_START_HOUR, end_hour: int = NIGHT_END_HOUR) -> bool:
    return hour >= start_hour or hour < end_hour


class OvertimeCappedNightPolicy(NightHoursPolicy):
    """Default rule: a night checkout turns up to ``cap`` overtime hours into night hours.

    Only the checkout hour is inspected; the worked interval is not walked, so
    night hours are zero whenever there is no overtime.
    """

    def __init__(self, *, cap: float = NIGHT_HOURS_CAP, start_hour: int = NIGHT_START_HOUR, end_hour: int = NIGHT_END_HOUR):
        self._cap = float(cap)
        self._start_hour = int(start_hour)
        self._end_hour = int(end_hour)

    def night_hours(self, *, check_in: datetime, check_out: datetime, overtime_hours: float) -> float:
        if not is_night_hour(check_out.hour, start_hour=self._start_hour, end_hour=self._end_hour):
            return 0.0
        return min(overtime_hours, self._cap)


class IntervalNightPolicy(NightHoursPolicy):
    """Counts the part of ``[check_in, check_out]`` that falls inside night windows."""

    def __init__(self, *, start_hour: int = NIGHT_START_HOUR, end_hour: int = NIGHT_END_HOUR):
        self._start = time(hour=int(start_hour))
        self._end = time(hour=int(end_hour))

    def night_hours(self, *, check_in: datetime, check_out: datetime, overtime_hours: float) -> float:
        total = 0.0
        # The window opening the evening before check-in may still cover its early hours.
        day = check_in.date() - timedelta(days=1)
        while day <= check_out.date():
            window_start = datetime.combine(day, self._start, tzinfo=check_in.tzinfo)
            window_end = datetime.combine(day + timedelta(days=1), self._end, tzinfo=check_in.tzinfo)
            overlap_start = max(window_start, check_in)
            overlap_end = min(window_end, check_out)
            if overlap_end > overlap_start:
                total += hours_between(overlap_start, overlap_end)
            day += timedelta(days=1)
        return total
