"""Tests for environment settings and logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest

from settings import LOGGER_NAME, Settings, configure_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


class TestSettingsFromEnv:

    def test_defaults(self, monkeypatch):
        for var in ("CALC_LOG_LEVEL", "CALC_LOG_FILE", "CALC_TITLE"):
            monkeypatch.delenv(var, raising=False)
        assert Settings.from_env() == Settings()

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CALC_LOG_LEVEL", "debug")
        monkeypatch.setenv("CALC_LOG_FILE", str(tmp_path / "calc.log"))
        monkeypatch.setenv("CALC_TITLE", "Desk")
        s = Settings.from_env()
        assert s.log_level == "DEBUG"
        assert s.log_file == str(tmp_path / "calc.log")
        assert s.title == "Desk"

    def test_empty_log_file_means_none(self, monkeypatch):
        monkeypatch.setenv("CALC_LOG_FILE", "")
        assert Settings.from_env().log_file is None


class TestConfigureLogging:

    def test_console_handler(self, clean_logger):
        logger = configure_logging(Settings(log_level="WARNING"))
        assert logger is clean_logger
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_file_handler(self, clean_logger, tmp_path):
        path = tmp_path / "calc.log"
        logger = configure_logging(Settings(log_level="DEBUG", log_file=str(path)))
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        logging.getLogger("calculator.store").info("hello")
        for h in logger.handlers:
            h.flush()
        assert "hello" in path.read_text(encoding="utf-8")

    def test_idempotent(self, clean_logger):
        configure_logging(Settings())
        configure_logging(Settings())
        assert len(clean_logger.handlers) == 1

    def test_second_call_adds_file(self, clean_logger, tmp_path):
        path = tmp_path / "calc.log"
        configure_logging(Settings())
        logger = configure_logging(Settings(log_file=str(path)))
        files = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(files) == 1
        assert len(logger.handlers) == 2
        logging.getLogger("calculator.api").warning("late file")
        for h in logger.handlers:
            h.flush()
        assert "late file" in path.read_text(encoding="utf-8")

    def test_same_file_added_once(self, clean_logger, tmp_path):
        settings = Settings(log_file=str(tmp_path / "calc.log"))
        configure_logging(settings)
        configure_logging(settings)
        assert len(clean_logger.handlers) == 2

    def test_second_call_updates_handler_levels(self, clean_logger):
        configure_logging(Settings(log_level="INFO"))
        logger = configure_logging(Settings(log_level="ERROR"))
        assert logger.level == logging.ERROR
        assert all(h.level == logging.ERROR for h in logger.handlers)

    def test_create_app_after_import_adds_file(self, clean_logger, tmp_path):
        from app import create_app
        from store import SessionStore

        configure_logging(Settings())
        path = tmp_path / "app.log"
        create_app(store=SessionStore(), settings=Settings(log_file=str(path)))
        assert any(
            isinstance(h, RotatingFileHandler) for h in clean_logger.handlers
        )

    def test_unknown_level_falls_back_to_info(self, clean_logger):
        logger = configure_logging(Settings(log_level="LOUD"))
        assert logger.level == logging.INFO
