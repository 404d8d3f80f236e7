#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision.

Run before the app starts; a failure aborts the deploy.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from alumni.config import Settings
from alumni.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    configure_logfire(Settings())

    with logfire.span("run_migrations", config=str(ALEMBIC_INI)):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database is at head revision")
    return 0


if __name__ == "__main__":
    sys.exit(main())
