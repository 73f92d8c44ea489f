from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import load_settings

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection

from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .reports.controller import register as register_reports
from .users.controller import register as register_users


def _init_mysql_schema(settings, logger) -> None:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
    apply_schema(conn, schema_path=schema_path)
    logger.info("MySQL schema ready (tables=%d)", len(list_tables(conn)))


def create_app(*, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    # Staff names and legacy notes are Arabic; keep them readable in JSON.
    app.json.ensure_ascii = False

    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))
    logger.info(
        "settings=%s store=%s timezone=%s policy=%s",
        settings.__name__,
        getattr(settings, "STORE_BACKEND", "sheets"),
        settings.TIMEZONE,
        settings.SCAN_POLICY,
    )

    if container is None:
        if settings.STORE_BACKEND == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            _init_mysql_schema(settings, logger)
        container = build_container(settings)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_users(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)
    register_reports(app, container)

    return app
