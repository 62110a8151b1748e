#!/usr/bin/env python3
"""Upgrade the AskAbout database schema, reporting failures to Logfire.

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2b7d9a40
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from askabout.config import Settings
from askabout.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def upgrade(revision: str = "head") -> None:
    with logfire.span("migrations.upgrade", revision=revision):
        command.upgrade(Config(ALEMBIC_INI), revision)


def main(argv: list[str]) -> int:
    configure_logfire(Settings())
    revision = argv[0] if argv else "head"

    try:
        upgrade(revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # A failed migration must stop the deploy
        raise

    logfire.info("Database is at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
