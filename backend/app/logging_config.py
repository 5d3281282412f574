"""Logging setup for the OneMatch API process.

Identity and profile modules log through ``app.*`` loggers; telemetry events
go to ``onematch.telemetry`` and can be tuned independently so event lines
can be silenced without hiding store warnings.
"""

import logging
import os
from logging.config import dictConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
TELEMETRY_LOGGER = "onematch.telemetry"
HTTP_DEBUG_LOGGERS = ("uvicorn.access", "fastapi")


def configure_logging() -> None:
    level = os.getenv("ONEMATCH_LOG_LEVEL", "INFO").upper()
    telemetry_level = os.getenv("ONEMATCH_TELEMETRY_LOG_LEVEL", level).upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": DEFAULT_LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
            "loggers": {
                TELEMETRY_LOGGER: {"level": telemetry_level},
            },
        }
    )

    if os.getenv("ONEMATCH_DEBUG_HTTP", "0") == "1":
        for name in HTTP_DEBUG_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)
