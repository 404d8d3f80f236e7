"""Standard library logging for the server process.

Application events go through logfire; this only shapes what uvicorn,
SQLAlchemy and asyncpg print through ``logging``.
"""

import logging
import sys

from alumni.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("asyncpg", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout at a level matching ``settings.debug``."""
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
