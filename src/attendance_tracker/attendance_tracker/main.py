from __future__ import annotations

import atexit
import importlib
import logging
import weakref
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_MAX_CODE_ATTEMPTS
from .database.bootstrap import apply_schema, list_tables
from .users.controller import register as register_users

logger = logging.getLogger("attendance_tracker")

_SETTING_NAMES = (
    "DATABASE_PATH",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "MAX_CODE_ATTEMPTS",
    "HISTORY_LIMIT",
    "HOST",
    "PORT",
)

# Containers still open; closed once at interpreter exit. Weak so finished
# apps (e.g. in tests) can be collected.
_open_containers = weakref.WeakSet()


@atexit.register
def _close_open_containers() -> None:
    for container in list(_open_containers):
        container.close()


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> tuple[str, dict]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in _SETTING_NAMES if hasattr(settings, name)}
    values.update(overrides or {})
    return settings_module, values


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.setLevel(level)


def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module, settings = _load_settings(config_overrides)
    app.config.update(settings)
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    _configure_logging(settings.get("LOG_LEVEL", "INFO"))

    database_path = str(settings["DATABASE_PATH"])
    logger.info("settings=%s db=%s", settings_module, database_path)

    container = build_container(
        database_path=database_path,
        max_code_attempts=int(settings.get("MAX_CODE_ATTEMPTS", DEFAULT_MAX_CODE_ATTEMPTS)),
        history_limit=int(settings.get("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)),
    )
    _open_containers.add(container)

    if bool(settings.get("AUTO_INIT_DB", True)):
        apply_schema(container.conn)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["attendance_tracker"] = container

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        kind = (e.name or "error").lower().replace(" ", "_")
        return jsonify({"error": e.description, "kind": kind}), e.code

    register_users(app, container)
    register_attendance(app, container)

    return app


def get_container(app: Flask):
    return app.extensions["attendance_tracker"]
