from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.controller import register as register_api
from .common.logging import get_logger, setup_logging
from .container import build_container

logger = get_logger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(
        json_output=bool(getattr(settings, "LOG_JSON", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
    )

    container = build_container(
        default_target_percentage=getattr(settings, "DEFAULT_TARGET_PERCENTAGE", None),
    )
    register_api(app, container)

    logger.info("app.created", settings=settings_module, debug=app.config["DEBUG"])
    return app
