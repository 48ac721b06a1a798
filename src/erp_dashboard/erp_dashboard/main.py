from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .access.controller import register as register_access
from .attendance.controller import register as register_attendance

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    access_config = getattr(settings, "ACCESS_CONFIG")
    report_config = getattr(settings, "REPORT_CONFIG")
    if app.config["DEBUG"]:
        logger.info("settings=%s report data=%s", settings_module, report_config.get("data_path"))

    container = container or build_container(access_config=access_config, report_config=report_config)

    register_access(app, container)
    register_attendance(app, container)

    return app
