import os

from .config import Config, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env("abc_staff_dev")

DEFAULT_HOURLY_RATE = Config.DEFAULT_HOURLY_RATE
TIMEZONE = Config.TIMEZONE
CRON_SECRET = Config.CRON_SECRET
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
