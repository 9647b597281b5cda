"""Central logging configuration for the clarification package.

Applies a root stdout handler so all module loggers emit at the configured
level without per-module setup, and avoids duplicate handlers when called
more than once.
"""
from __future__ import annotations
import copy
import logging
from logging.config import dictConfig
from typing import Optional

_DICT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}


def build_logging_config(level: str = "INFO") -> dict:
    cfg = copy.deepcopy(_DICT_CONFIG)
    cfg["handlers"]["console"]["level"] = level
    cfg["root"]["level"] = level
    return cfg


def configure_logging(level: Optional[str] = None) -> None:
    """Configure package-wide logging once.

    When no level is given it is read from `load_config()`. If the root
    logger already has handlers, return to prevent duplicate output.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    if level is None:
        from clarifier.config import load_config

        level = load_config().logging.level
    dictConfig(build_logging_config(level))


__all__ = ["build_logging_config", "configure_logging"]
