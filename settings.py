"""Runtime settings and logging setup.

Settings come from the environment:

    CALC_LOG_LEVEL   logging level name (default INFO)
    CALC_LOG_FILE    optional path for a rotating log file
    CALC_TITLE       window / API title (default "Calculator")
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_MAX_BYTES = 512_000
LOG_BACKUPS = 2


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: str | None = None
    title: str = "Calculator"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            log_level=os.getenv("CALC_LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("CALC_LOG_FILE") or None,
            title=os.getenv("CALC_TITLE", "Calculator"),
        )


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach console (and optional file) handlers to the calculator logger.

    Safe to call more than once: each call applies its level to every
    handler, and adds the console handler or a file handler only when one
    for that target is not attached yet.
    """
    level = getattr(logging, settings.log_level, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for h in logger.handlers:
        h.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT)

    if not any(_is_console(h) for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    if settings.log_file and not _has_file_handler(logger, settings.log_file):
        fh = RotatingFileHandler(
            settings.log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def _is_console(handler: logging.Handler) -> bool:
    # FileHandler subclasses StreamHandler
    return isinstance(handler, logging.StreamHandler) and not isinstance(
        handler, logging.FileHandler
    )


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == target
        for h in logger.handlers
    )
