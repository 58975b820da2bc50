"""Dependency injection module.

Concrete providers (config, domain services, use cases) have a single
implementation. Mockable components (persistence) have a production and an
in-memory implementation, chosen when a container is built.
"""

from collections.abc import Collection
from typing import Type

from threadly.util.di.application import ProdApplicationProvider
from threadly.util.di.base import Component, ProviderBase
from threadly.util.di.core import ProdConfigProvider
from threadly.util.di.domain import ProdDomainProvider
from threadly.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have an in-memory implementation."""
    return {base.__mock_component__ for base in PROVIDERS if base.__mock_component__}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider entry.

    A base without subclasses is concrete and returned as-is. Otherwise the
    subclass whose __is_mock__ matches use_mock is returned. Subclasses are
    only visible once their module is imported, which the infrastructure
    package does.

    Raises:
        ValueError: If the requested implementation is not registered
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")

    return impl


def select_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per PROVIDERS entry.

    Args:
        mocked: Components to back with their in-memory implementation

    Returns:
        Provider instances ready for make_async_container
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "select_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
