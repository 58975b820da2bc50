"""Unit tests for the request-scoped database transaction."""

import pytest
from dishka import Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from threadly.util.di import ProdConfigProvider, ProdPersistenceProvider


class RecordingTransaction:
    def __init__(self, events: list[str]) -> None:
        self.events = events

    async def commit(self) -> None:
        self.events.append("commit")

    async def rollback(self) -> None:
        self.events.append("rollback")


class RecordingSession:
    """Stands in for AsyncSession, recording how the transaction ends."""

    def __init__(self, events: list[str]) -> None:
        self.events = events

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.events.append("close")

    async def begin(self) -> RecordingTransaction:
        self.events.append("begin")
        return RecordingTransaction(self.events)


class RecordingSessionProvider(Provider):
    """Replaces the engine-backed session factory, keeping the real get_session."""

    def __init__(self, events: list[str]) -> None:
        super().__init__()
        self.events = events

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: RecordingSession(self.events)


def _container(events: list[str]):
    return make_async_container(
        ProdConfigProvider(),
        ProdPersistenceProvider(),
        RecordingSessionProvider(events),
    )


@pytest.mark.asyncio
async def test_clean_request_commits():
    events: list[str] = []
    container = _container(events)

    async with container() as request:
        await request.get(AsyncSession)

    await container.close()

    assert events == ["begin", "commit", "close"]


@pytest.mark.asyncio
async def test_failed_request_rolls_back():
    """An exception leaving the request scope must not be committed."""
    events: list[str] = []
    container = _container(events)

    with pytest.raises(RuntimeError, match="handler failed"):
        async with container() as request:
            await request.get(AsyncSession)
            raise RuntimeError("handler failed")

    await container.close()

    assert events == ["begin", "rollback", "close"]


@pytest.mark.asyncio
async def test_session_not_opened_when_unused():
    events: list[str] = []
    container = _container(events)

    async with container():
        pass

    await container.close()

    assert events == []
