from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_HOURLY_RATE, DEFAULT_TIMEZONE
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CRON_SECRET"] = getattr(settings, "CRON_SECRET", None)
    db_config = getattr(settings, "DB_CONFIG")

    logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

    if getattr(settings, "AUTO_INIT_DB", False):
        config = DBConfig.from_mapping(db_config)
        apply_schema(config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(config)))

    container = build_container(
        db_config=db_config,
        default_hourly_rate=getattr(settings, "DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE),
        timezone_name=getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE),
    )
    register_attendance(app, container)

    return app
