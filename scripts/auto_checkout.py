"""Close attendance records left open from earlier days.

Runs the service layer directly (no Flask), for hosts where cron cannot call
``POST /api/cron/auto-checkout``.
"""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from abc_staff.container import build_container
from abc_staff.core.constants import DEFAULT_HOURLY_RATE, DEFAULT_TIMEZONE
from abc_staff.main import configure_logging

logger = logging.getLogger("abc_staff.scripts.auto_checkout")


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings.DB_CONFIG,
        default_hourly_rate=getattr(settings, "DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE),
        timezone_name=getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE),
    )
    result = container.attendance_service.auto_checkout_pending()
    for error in result.errors:
        logger.warning("not closed: %s", error)
    return 1 if result.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
