from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables, seed_demo_profiles
from .errors import register_error_handlers
from .logging_utils import setup_logging
from .profiles.controller import register as register_profiles
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    app.secret_key = settings.SECRET_KEY
    app.config["DEBUG"] = bool(settings.DEBUG)
    app.config["TESTING"] = bool(settings.TESTING)

    setup_logging(settings.LOG_LEVEL, json_output=bool(settings.LOG_JSON))

    if container is None:
        db_config = settings.DB_CONFIG
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings.SETTINGS_MODULE,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if settings.AUTO_INIT_DB:
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if settings.AUTO_SEED_DB:
            seed_demo_profiles(db_config)

        container = build_container(
            db_config=db_config,
            late_cutoff_hour=settings.LATE_CUTOFF_HOUR,
            recent_limit=settings.RECENT_HISTORY_LIMIT,
        )

    app.extensions["attendance_container"] = container
    register_error_handlers(app)
    register_profiles(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
