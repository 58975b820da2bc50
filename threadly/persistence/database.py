"""Database engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from threadly.config import Settings

APPLICATION_NAME = "threadly-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Every connection reports itself as threadly-api in pg_stat_activity and
    runs with a server-side statement timeout, so a stuck query fails the
    request instead of holding a pooled connection.

    Args:
        settings: Application settings with database URL and pool limits

    Returns:
        Configured async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout_seconds,
        connect_args={
            "server_settings": {
                "application_name": APPLICATION_NAME,
                "statement_timeout": str(database.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Sessions neither autoflush nor expire on commit: repositories flush
    explicitly and return domain models, never ORM state.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
