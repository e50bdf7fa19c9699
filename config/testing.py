import os

from .config import Config, db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env("abc_staff_test")

DEFAULT_HOURLY_RATE = Config.DEFAULT_HOURLY_RATE
TIMEZONE = Config.TIMEZONE
CRON_SECRET = "test-cron-secret"
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
