from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .core.logging import setup_logging
from .database.connection import StoreConfig

from .container import build_container
from .attendance.controller import register as register_attendance
from .leave_types.controller import register as register_leave_types
from .leaves.controller import register as register_leaves
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)


def create_app(*, store_path: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_logs=bool(getattr(settings, "JSON_LOGS", False)),
    )

    store_config = StoreConfig(path=store_path or getattr(settings, "STORE_PATH"))
    logger.info("Starting attendance tracker (settings=%s, store=%s)", settings_module, store_config.path)

    container = build_container(store_config=store_config)

    if bool(getattr(settings, "AUTO_MIGRATE", False)):
        container.settings_service.perform_migration()

    app.extensions["attendance_tracker"] = container

    register_attendance(app, container)
    register_leave_types(app, container)
    register_leaves(app, container)
    register_settings(app, container)

    return app
