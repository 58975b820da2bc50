"""Observability configuration using Logfire.

Services and repositories call logfire directly:

    with logfire.span("vote_service.vote_post", post_id=str(post_id)):
        ...
        logfire.info("Post vote cast", direction=direction.value)

This module only configures Logfire once at startup and instruments the
FastAPI app and the SQLAlchemy engine.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from threadly.config import Settings

# Polled by the load balancer; tracing it only adds noise
UNTRACED_URLS = "/health"


def should_send_to_logfire(settings: Settings) -> bool:
    """Whether telemetry goes to Logfire cloud.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, otherwise telemetry is
    sent only when a token is configured.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Development prints spans to the console; tests print nothing. Set
    OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire cloud.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    if settings.environment == "test":
        console: logfire.ConsoleOptions | bool = False
    else:
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name="threadly-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health checks.

    Request spans carry the method, the path and, for post routes, the
    post id so a trace can be found from a post.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        post_id = request.path_params.get("post_id")
        if post_id is not None:
            result["post_id"] = post_id
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
