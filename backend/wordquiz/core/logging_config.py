"""Logging setup for the wordquiz service."""
from __future__ import annotations
import logging

LOGGER_NAME = "wordquiz"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(module)s: %(message)s"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger with a single console handler.

    Safe to call more than once: existing handlers are replaced, so app
    reloads do not duplicate output.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    # Uvicorn's access log is noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logger
