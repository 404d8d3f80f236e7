"""Logfire setup and instrumentation.

Domain services open spans named ``<service>.<operation>`` and emit
structured events, for example::

    with logfire.span("like_service.toggle_like", kind=kind.value):
        ...
        logfire.info("Like toggled", action=result.action.value)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from alumni.config import ObservabilitySettings, Settings

SERVICE_NAME = "alumni-api"
SERVICE_VERSION = "0.1.0"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry goes to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise telemetry is sent only
    when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported."""
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
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
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span for every request handled by ``app``."""
    logfire.instrument_fastapi(app)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span for every statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
