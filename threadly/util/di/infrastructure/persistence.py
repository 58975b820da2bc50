"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from threadly.config import Settings
from threadly.domain.repository import (
    PostRepository,
    SubredditRepository,
    UserRepository,
)
from threadly.persistence.database import create_engine, create_session_factory
from threadly.persistence.repository import (
    PostgresPostRepository,
    PostgresSubredditRepository,
    PostgresUserRepository,
)
from threadly.util.di.base import ProviderBase
from threadly.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories for users, subreddits and posts.

    Implemented by ProdPersistenceProvider (PostgreSQL) and, in tests, by an
    in-memory provider.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one request-scoped session."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        logfire.info("Database engine created", pool_size=settings.database.pool_size)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One session and one transaction per request.

        Dishka sends the exception that closed the request scope (or None)
        back into this generator. The transaction commits on None and rolls
        back otherwise, so a post and its author's karma are stored together
        or not at all.
        """
        async with session_factory() as session:
            transaction = await session.begin()
            exc = yield session
            if exc is None:
                await transaction.commit()
            else:
                logfire.warn(
                    "Request transaction rolled back",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                await transaction.rollback()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subreddit_repository(self, session: AsyncSession) -> SubredditRepository:
        """Provide Subreddit repository."""
        return PostgresSubredditRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)
