"""Logging configuration for the booking registry."""

import logging.config
from typing import Any


def configure_logging(level: str = "INFO") -> None:
    """
    Configure console logging for the ``travel_booking`` package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "level": level,
            },
        },
        "loggers": {
            "travel_booking": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }
    logging.config.dictConfig(config)
