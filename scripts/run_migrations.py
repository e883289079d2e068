#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from tullamore.config import Settings
from tullamore.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config", default="alembic.ini", help="Alembic ini file")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--upgrade", metavar="REVISION", default="head")
    target.add_argument("--downgrade", metavar="REVISION")
    args = parser.parse_args(argv)

    configure_logfire(Settings())
    alembic_cfg = Config(args.config)

    with logfire.span(
        "run_migrations", upgrade=args.upgrade, downgrade=args.downgrade
    ):
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, args.downgrade)
            else:
                command.upgrade(alembic_cfg, args.upgrade)
        except Exception as e:
            logfire.error(
                "Migration failed: {error}",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start against a broken schema
            raise

    logfire.info("Migrations applied")
    return 0


if __name__ == "__main__":
    sys.exit(main())
