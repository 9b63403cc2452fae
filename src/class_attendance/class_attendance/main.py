from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .container import build_container
from .reports.controller import register as register_reports
from .sections.controller import register as register_sections
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

LOG_FORMAT = "[class-attendance] %(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("class_attendance").setLevel(level.upper())


def create_app(settings_overrides: Optional[dict[str, Any]] = None) -> Flask:
    # .env from the working directory; real environment variables win
    load_dotenv(find_dotenv(usecwd=True), override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    # settings modules read os.environ at import time; re-read after .env is loaded
    settings = importlib.reload(importlib.import_module(settings_module))
    overrides = settings_overrides or {}

    def setting(name: str, default: Any = None) -> Any:
        return overrides.get(name, getattr(settings, name, default))

    app.config["DEBUG"] = bool(setting("DEBUG", False))
    app.config["TESTING"] = bool(setting("TESTING", False))
    app.config["HOST"] = str(setting("HOST", "127.0.0.1"))
    app.config["PORT"] = int(setting("PORT", 5000))
    _configure_logging(str(setting("LOG_LEVEL", "INFO")))

    container = build_container(
        auth_username=str(setting("AUTH_USERNAME", "admin")),
        auth_password=str(setting("AUTH_PASSWORD", "password123")),
        seed=bool(setting("SEED_DEMO_DATA", True)),
    )
    app.extensions["class_attendance"] = container

    register_auth(app, container)
    register_sections(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        # routing redirects are HTTPExceptions too; pass them through
        if e.code is None or e.code < 400:
            return e
        return jsonify({"message": e.description}), e.code

    logger.info(
        "app ready (settings=%s, sections=%d, students=%d)",
        settings_module,
        len(container.store.list_sections()),
        len(container.store.list_students()),
    )
    return app
