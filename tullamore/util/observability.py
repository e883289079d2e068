"""Logfire setup and library instrumentation.

Application code logs through logfire directly, e.g.
``logfire.info("Question added", question_id=str(question.id))``.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tullamore.config import Settings

SERVICE_NAME = "tullamore-backend"


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process.

    Telemetry leaves the process only when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    is true, or when it is unset and a token is configured.
    """
    send_to_logfire = _should_send(settings)
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            span_style="show-parents", verbose=settings.debug
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured for {environment}",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span for every request, tagged with method and path."""

    def _request_attributes(request, attributes):
        return {**attributes, "method": request.method, "path": request.url.path}

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
