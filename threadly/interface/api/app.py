"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from threadly.config import Settings
from threadly.interface.api.routes import comments, health, posts, votes
from threadly.interface.error import register_error_handlers
from threadly.util.di.container import container_lifespan, create_container, setup_di
from threadly.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container, production container if None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Threadly API",
        description="Backend API for Threadly - posts, threaded comments, communities and voting",
        version=health.API_VERSION,
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Error envelope must be added after DI so it wraps the request scope
    register_error_handlers(app_instance)

    # CORS goes last so error responses carry its headers too
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)

    return app_instance


app = create_app()
