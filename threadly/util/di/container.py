"""Dependency injection container."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from threadly.util.di import select_providers


def create_container() -> AsyncContainer:
    """Build production container (Postgres persistence, real services).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers and the FastAPI
        request provider
    """
    return make_async_container(*select_providers(), FastapiProvider())


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the app's container on shutdown.

    Closing the APP scope runs provider finalizers, which disposes the
    database engine and its connection pool.
    """
    yield
    await app.state.dishka_container.close()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    Every DishkaRoute handler then runs inside its own REQUEST scope, so
    repositories in one request share a session and transaction.

    Args:
        app: FastAPI application, created with container_lifespan
        container: DI container
    """
    setup_dishka(container, app)
