from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_PROJECT_ID
from .core.exceptions import DomainError, NotFoundError
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .employees.controller import register as register_employees
from .financials.controller import register as register_financials
from .jalali.controller import register as register_calendar
from .notes.controller import register as register_notes
from .payroll.controller import register as register_payroll
from .projects.controller import register as register_projects
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        status = 404 if isinstance(e, NotFoundError) else 400
        return jsonify({"success": False, "message": str(e)}), status

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"success": False, "message": e.description}), e.code


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(DatabaseConnection.get_instance(DBConfig.from_mapping(db_config)), schema_path=SCHEMA_PATH)
        container = build_container(
            db_config=db_config,
            default_project_id=getattr(settings, "DEFAULT_PROJECT_ID", DEFAULT_PROJECT_ID),
        )

    register_error_handlers(app)
    register_calendar(app)
    register_projects(app, container)
    register_settings(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_financials(app, container)
    register_notes(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)

    return app


def run() -> None:
    """Serve the app for the local user (``attendance-payroll`` console script)."""
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    app = create_app()
    app.run(
        host=getattr(settings, "HOST", "127.0.0.1"),
        port=int(getattr(settings, "PORT", 5000)),
        debug=app.config["DEBUG"],
    )
