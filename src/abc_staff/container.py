from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import CheckoutStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import load_timezone
from .core.constants import DEFAULT_HOURLY_RATE, DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .payroll.calculator.base import NightHoursPolicy
from .payroll.calculator.checkout_calculator import CheckoutPayCalculator
from .payroll.service import HourlyRateResolver
from .stores.mysql_store_repository import MySQLStoreRepository
from .stores.repository import StoreRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    stores_repo: StoreRepository
    attendance_repo: AttendanceRepository

    rate_resolver: HourlyRateResolver
    pay_calculator: CheckoutPayCalculator
    attendance_service: AttendanceService


def build_services(
    *,
    attendance_repo: AttendanceRepository,
    stores_repo: StoreRepository,
    conn: Optional[DatabaseConnection] = None,
    default_hourly_rate: float = DEFAULT_HOURLY_RATE,
    timezone_name: str = DEFAULT_TIMEZONE,
    night_policy: Optional[NightHoursPolicy] = None,
) -> Container:
    rate_resolver = HourlyRateResolver(stores_repo, default_rate=default_hourly_rate)
    pay_calculator = CheckoutPayCalculator(load_timezone(timezone_name), night_policy=night_policy)
    attendance_service = AttendanceService(
        attendance_repo,
        rate_resolver,
        calculator=pay_calculator,
        strategy_factory=CheckoutStrategyFactory(),
    )

    return Container(
        conn=conn,
        stores_repo=stores_repo,
        attendance_repo=attendance_repo,
        rate_resolver=rate_resolver,
        pay_calculator=pay_calculator,
        attendance_service=attendance_service,
    )


def build_container(
    *,
    db_config: dict,
    default_hourly_rate: float = DEFAULT_HOURLY_RATE,
    timezone_name: str = DEFAULT_TIMEZONE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        stores_repo=MySQLStoreRepository(conn),
        conn=conn,
        default_hourly_rate=default_hourly_rate,
        timezone_name=timezone_name,
    )
