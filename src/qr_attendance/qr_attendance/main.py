from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .container import build_container, build_store
from .core.exceptions import AuthorizationError, StorageError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .devices.controller import register as register_devices
from .logging_setup import configure_logging
from .qr.controller import register as register_qr
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, **overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    def setting(name: str, default=None):
        return overrides.get(name, getattr(settings, name, default))

    configure_logging(level=setting("LOG_LEVEL", "INFO"), log_file=setting("LOG_FILE"))

    app.secret_key = setting("SECRET_KEY")
    app.config["DEBUG"] = bool(setting("DEBUG", False))
    app.config["TESTING"] = bool(setting("TESTING", False))
    app.config["DEVICE_COOKIE_MAX_AGE_DAYS"] = int(setting("DEVICE_COOKIE_MAX_AGE_DAYS", 180))
    app.permanent_session_lifetime = timedelta(hours=int(setting("ADMIN_SESSION_HOURS", 12)))

    backend = str(setting("STORE_BACKEND", "json")).lower()
    data_dir = Path(setting("DATA_DIR", "data"))
    db_config = setting("DB_CONFIG", {})

    if backend == "mysql" and bool(setting("AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    store = build_store(backend=backend, data_dir=data_dir, db_config=db_config)
    container = build_container(
        store=store,
        admin_user=str(setting("ADMIN_USER", "admin")),
        admin_pass=str(setting("ADMIN_PASS", "admin123")),
    )
    container.roster_service.seed_from_file(data_dir / "roster.csv")
    app.extensions["qr_attendance"] = container

    logger.info("settings=%s store=%s", settings_module, backend)

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.error("Storage failure: %s", e)
        return jsonify({"status": "error", "message": "Storage is unavailable, please try again"}), 503

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(e: AuthorizationError):
        return jsonify({"error": "unauthorized", "message": str(e)}), 401

    register_devices(app, container)
    register_auth(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_qr(app, container)

    return app
