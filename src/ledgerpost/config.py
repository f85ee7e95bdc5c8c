"""Environment settings and logging configuration."""

import logging
import logging.config
from typing import Optional

DB_PATH_ENV = "LEDGERPOST_DB_PATH"
OWNER_ENV = "LEDGERPOST_OWNER"
LOG_LEVEL_ENV = "LEDGERPOST_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "ledgerpost": {
            "handlers": ["console"],
            "level": DEFAULT_LOG_LEVEL,
            "propagate": False,
        },
    },
}


def configure_logging(level: Optional[str] = None) -> None:
    """Apply LOGGING_CONFIG, overriding the package log level if given."""
    config = {**LOGGING_CONFIG, "loggers": {k: dict(v) for k, v in LOGGING_CONFIG["loggers"].items()}}
    if level:
        level_name = level.upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level '{level}'")
        config["loggers"]["ledgerpost"]["level"] = level_name
    logging.config.dictConfig(config)
