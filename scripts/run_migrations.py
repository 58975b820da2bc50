#!/usr/bin/env python3
"""Bring the Threadly schema to a revision (default: head).

Runs before the API starts; a failed migration exits non-zero so the API
never starts against a half-migrated schema.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f7a9d2e40
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from threadly.config import Settings
from threadly.util.observability import configure_logfire


def alembic_config(settings: Settings) -> Config:
    """Alembic config pointed at the application database."""
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database.url)
    return config


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    target = argv[0] if argv else "head"

    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span(
            "run_migrations", environment=settings.environment, target=target
        ):
            command.upgrade(alembic_config(settings), target)

        logfire.info("Database migrated", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
