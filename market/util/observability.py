"""Logfire setup and library instrumentation.

Application code logs through logfire directly:

    logfire.info("Comment created", comment_id=comment.id)

    with logfire.span("comment_service.delete_thread", comment_id=comment_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from market.config import Settings

SERVICE_NAME = "market-api"
SERVICE_VERSION = "0.1.0"

# Load balancer health checks would drown out real traffic
UNTRACED_URLS = "/health"


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Events go to Logfire cloud when a token is configured, or when
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so; the console always gets them.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming HTTP requests, except health checks."""
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound HTTP requests (captcha verification)."""
    logfire.instrument_httpx()
