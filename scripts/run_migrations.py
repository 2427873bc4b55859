#!/usr/bin/env python3
"""Upgrade the DevOps WithDami schema, reporting failures to Logfire.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from dami.config import Settings
from dami.util.logging import setup_logging
from dami.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str] | None = None) -> int:
    """Upgrade the database to the requested revision."""
    args = sys.argv[1:] if argv is None else argv
    revision = args[0] if args else "head"

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config(str(ALEMBIC_INI))
    # Keep script_location valid when run from another directory
    alembic_cfg.set_main_option(
        "script_location", str(ALEMBIC_INI.parent / "migrations")
    )

    with logfire.span(
        "migrations.upgrade", revision=revision, environment=settings.environment
    ):
        try:
            logfire.info("Upgrading database schema", revision=revision)
            command.upgrade(alembic_cfg, revision)
            logfire.info("Database schema at revision", revision=revision)
            return 0
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy stops before the app serves a stale schema
            raise


if __name__ == "__main__":
    sys.exit(main())
