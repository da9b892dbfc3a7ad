from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from .availability.controller import register as register_availability
from .config import get_settings_module
from .container import build_container
from .core.exceptions import AuthorizationError, ValidationError
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("settings=%s", settings_module)

    container = build_container(
        seed_file=getattr(settings, "SEED_FILE", "") or None,
        handover_minutes=int(getattr(settings, "HANDOVER_WARNING_MINUTES", 30)),
        fail_open=bool(getattr(settings, "FAIL_OPEN_MISSING_SHIFT", True)),
        default_tz_offset_minutes=getattr(settings, "DEFAULT_TZ_OFFSET_MINUTES", None),
    )
    app.extensions["hotel_ops"] = container

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok", "service": "hotel-ops-shifts"})

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(e: AuthorizationError):
        return jsonify({"success": False, "message": str(e)}), 403

    register_availability(app, container)
    register_schedules(app, container)

    return app
