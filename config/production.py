import os

from .config import Config, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env("")

DEFAULT_HOURLY_RATE = Config.DEFAULT_HOURLY_RATE
TIMEZONE = Config.TIMEZONE
CRON_SECRET = Config.CRON_SECRET
LOG_LEVEL = Config.LOG_LEVEL

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
