#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f2c9d1a7b64
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    alembic_cfg = Config(str(ALEMBIC_INI))
    # Keep the Logfire logging bridge instead of alembic.ini handlers
    alembic_cfg.attributes["configure_logger"] = False

    with logfire.span("run_migrations", revision=args.revision):
        try:
            command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a half-migrated schema
            raise

    logfire.info("Database migrations applied", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
