from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from abc_staff.payroll.calculator.checkout_calculator import CheckoutPayCalculator
from abc_staff.payroll.calculator.night_policy import IntervalNightPolicy, OvertimeCappedNightPolicy, is_night_hour

SEOUL = ZoneInfo("Asia/Seoul")


def _at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 3, day, hour, minute, tzinfo=SEOUL)


@pytest.mark.parametrize("hour, expected", [(21, False), (22, True), (23, True), (0, True), (5, True), (6, False), (12, False)])
def test_is_night_hour(hour, expected):
    assert is_night_hour(hour) is expected


def test_overtime_capped_policy_needs_overtime():
    policy = OvertimeCappedNightPolicy()

    assert policy.night_hours(check_in=_at(3, 15), check_out=_at(3, 23), overtime_hours=0) == 0
    assert policy.night_hours(check_in=_at(3, 12), check_out=_at(3, 23), overtime_hours=1.5) == 1.5
    assert policy.night_hours(check_in=_at(3, 12), check_out=_at(3, 14), overtime_hours=3) == 0


def test_overtime_capped_policy_custom_cap():
    policy = OvertimeCappedNightPolicy(cap=1)

    assert policy.night_hours(check_in=_at(3, 12), check_out=_at(4, 2), overtime_hours=3) == 1


def test_interval_policy_counts_evening_and_early_morning():
    policy = IntervalNightPolicy()

    assert policy.night_hours(check_in=_at(3, 20), check_out=_at(4, 2), overtime_hours=0) == pytest.approx(4)
    assert policy.night_hours(check_in=_at(4, 1), check_out=_at(4, 7), overtime_hours=0) == pytest.approx(5)
    assert policy.night_hours(check_in=_at(3, 9), check_out=_at(3, 18), overtime_hours=0) == 0


def test_interval_policy_spanning_two_nights():
    policy = IntervalNightPolicy()

    # 21:00 day 3 -> 23:30 day 4: 8h first night + 1.5h second night
    assert policy.night_hours(check_in=_at(3, 21), check_out=_at(4, 23, 30), overtime_hours=0) == pytest.approx(9.5)


def test_calculator_accepts_interval_policy():
    calc = CheckoutPayCalculator(SEOUL, night_policy=IntervalNightPolicy())

    pay = calc.calculate(
        check_in_time=datetime(2025, 3, 3, 18, 0),
        check_out_time=datetime(2025, 3, 4, 0, 0),
        hourly_rate=10000,
    )

    assert pay.overtime_hours == 0
    assert pay.night_hours == pytest.approx(2)
    assert pay.night_pay == pytest.approx(10000)
