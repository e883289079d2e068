#!/usr/bin/env python3
"""Serve the API with uvicorn using host and port from Settings."""

import argparse
import sys

import logfire
import uvicorn

from tullamore.config import Settings
from tullamore.util.logging import setup_logging
from tullamore.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    # Before uvicorn starts so import errors in the app are reported
    configure_logfire(settings)

    logfire.info(
        "Starting API on {host}:{port}", host=settings.host, port=settings.port
    )
    try:
        uvicorn.run(
            "tullamore.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            reload=args.reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API failed to start: {error}",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
