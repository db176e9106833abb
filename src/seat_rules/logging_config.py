"""
Logging configuration for SeatRules.

The library itself only creates module loggers; applications (and the CLI)
call ``setup_logging`` once at startup.
"""

import logging
import logging.config
import sys
from typing import Optional

from .config import get_settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure console logging for the ``seat_rules`` logger.

    Args:
        log_level: Logging level name. Defaults to ``Settings.log_level``.
    """
    level = (log_level or get_settings().log_level).upper()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "seat_rules": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)
