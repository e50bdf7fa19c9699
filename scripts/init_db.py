from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from abc_staff.database.bootstrap import apply_schema, list_tables
from abc_staff.database.connection import DBConfig
from abc_staff.main import configure_logging

logger = logging.getLogger("abc_staff.scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    config = DBConfig.from_mapping(settings.DB_CONFIG)

    schema_path = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    apply_schema(config, schema_path=schema_path)
    logger.info("Applied schema.sql -> %s (tables=%d)", config.describe(), len(list_tables(config)))


if __name__ == "__main__":
    main()
