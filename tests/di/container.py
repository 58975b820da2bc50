"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from threadly.util.di import PROVIDERS, Component, mockable_components, select_providers


def build_test_container(
    unmock: set[Component] | None = None, with_fastapi: bool = False
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables (ENVIRONMENT=test in conftest).

    Args:
        unmock: Components to use production implementations for.
                All others use their in-memory implementation.
        with_fastapi: Add the FastAPI integration provider, needed when the
                container is handed to create_app.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components or dependency violations

    Examples:
        # Unit tests - in-memory repositories
        container = build_test_container()

        # Integration tests - PostgreSQL repositories
        container = build_test_container(unmock={"persistence"})

        # HTTP tests - in-memory repositories behind the app
        container = build_test_container(with_fastapi=True)
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = select_providers(mocked=mockable_components() - unmock)
    if with_fastapi:
        providers.append(FastapiProvider())

    return make_async_container(*providers)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject unknown components and unmocked components with mocked dependencies.

    Raises:
        ValueError: If unknown components or dependency violations
    """
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    for base in PROVIDERS:
        if base.__mock_component__ in unmock:
            missing = base.__depends_on__ - unmock
            if missing:
                raise ValueError(
                    f"Component '{base.__mock_component__}' requires {missing} to be unmocked"
                )
