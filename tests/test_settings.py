from __future__ import annotations

import logging

from config import get_settings_module, load_settings
from src.aura_panel.aura_panel.common.logger import LOGGER_NAME, configure_logging


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "TEST")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_testing_settings_do_not_auto_load():
    settings = load_settings("testing")

    assert settings.AUTO_LOAD is False
    assert settings.DEVICE_TIMEOUT_SECONDS > 0


def test_configure_logging_writes_rotating_file(tmp_path):
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    try:
        log_file = tmp_path / "logs" / "panel.log"
        configure_logging("INFO", str(log_file))
        logging.getLogger(f"{LOGGER_NAME}.attendance.service").info("loaded 3 students")
        for h in logger.handlers:
            h.flush()

        assert len(logger.handlers) == 2
        assert "loaded 3 students" in log_file.read_text(encoding="utf-8")
    finally:
        for h in logger.handlers:
            h.close()
        logger.handlers[:] = saved
