"""
Logging setup
"""
import logging.config
from typing import Optional

from studentblog.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once for the app and the scripts

    Args:
        level: log level name, defaults to settings.LOG_LEVEL (DEBUG when settings.DEBUG)
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {"handlers": ["console"], "level": level.upper()},
        "loggers": {
            # SQL echo is controlled by the engine, keep it out of INFO
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    })
