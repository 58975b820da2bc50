"""Process-level logging configuration.

Threadly code logs through logfire. Third-party libraries (uvicorn,
alembic, SQLAlchemy, asyncpg) use the stdlib logging module; their records
are forwarded to logfire so both end up in the same console and traces.
"""

import logging

import logfire

from threadly.config import Settings

# Chatty at INFO, only their warnings are worth keeping
NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Root log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Forward stdlib logging to logfire.

    Call after configure_logfire so forwarded records use its settings.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
