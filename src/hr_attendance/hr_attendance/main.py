from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import error_response
from .container import build_container, build_storage
from .core.exceptions import DomainError
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "text"))
    logger.info("settings=%s storage=%s", settings_module, getattr(settings, "STORAGE_BACKEND", "json"))

    container = build_container(
        storage=build_storage(settings),
        random_seed=getattr(settings, "SEED_RANDOM_SEED", None),
    )
    app.extensions["hr_attendance"] = container

    app.register_error_handler(DomainError, error_response)

    register_attendance(app, container)
    register_leaves(app, container)
    register_employees(app, container)

    return app
