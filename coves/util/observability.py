"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Thread loaded", post_uri=post_uri, count=len(comments))

    # Manual spans for critical operations
    with logfire.span("thread_session.load", post_uri=post_uri):
        ...
"""

import logfire
from fastapi import FastAPI

from coves.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN environment variable to enable cloud sending
    - If token is present, logs will be sent to Logfire cloud by default
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "coves-threads",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, capture_headers=True)
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx client with Logfire.

    Traces every request made to the Coves AppView.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
