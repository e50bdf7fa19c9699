import os


def db_config_from_env(default_password: str) -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "abc_staff"),
    }


class Config:
    """Settings shared by every environment."""

    # Statutory fallback when a store has no hourly rate (KRW, 2024 minimum wage).
    DEFAULT_HOURLY_RATE = float(os.getenv("DEFAULT_HOURLY_RATE", "9860"))
    # Timezone used for work dates and the night-hour window.
    TIMEZONE = os.getenv("TIMEZONE", "Asia/Seoul")
    CRON_SECRET = os.getenv("CRON_SECRET") or None
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
