#!/usr/bin/env python3
"""Start the Threadly API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from threadly.config import Settings
from threadly.util.logging import setup_logging
from threadly.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    # Forward uvicorn and SQLAlchemy logs to Logfire
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Threadly API",
            environment=settings.environment,
            port=settings.port,
        )

        # The app module builds its container on import
        uvicorn.run(
            "threadly.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            log_config=None,  # Keep the logfire handler from setup_logging
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
