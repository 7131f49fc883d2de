from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .attendance.controller import register as register_panel
from .common.logger import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_CLASS_NAME, DEFAULT_DEVICE_BASE_URL, DEFAULT_TIMEOUT_SECONDS

log = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, *, env: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings(env)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    if container is None:
        device_config = {
            "base_url": getattr(settings, "DEVICE_BASE_URL", DEFAULT_DEVICE_BASE_URL),
            "timeout": getattr(settings, "DEVICE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        }
        log.info("connecting to attendance device at %s", device_config["base_url"])
        container = build_container(
            device_config=device_config,
            class_name=getattr(settings, "CLASS_NAME", DEFAULT_CLASS_NAME),
            auto_load=bool(getattr(settings, "AUTO_LOAD", True)),
            strict=bool(getattr(settings, "STRICT_TOGGLE", False)),
        )

    register_panel(app, container)

    return app
