"""Structured logger setup shared across handlers and services."""

import logging

from pythonjsonlogger import jsonlogger

from config.settings import Settings


def resolve_level(name: str) -> int:
    """Map a level name to its number. Unknown names fall back to INFO."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    The level comes from Settings.log_level so a noisy environment can be
    turned down without a redeploy.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(resolve_level(Settings.from_environment().log_level))
    logger.propagate = False
    return logger
