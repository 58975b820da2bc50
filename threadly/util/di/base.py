"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider without subclasses is used as-is. A mockable component is a
    base declaring `__mock_component__` with one production and one mock
    subclass (`__is_mock__ = True`).

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is the in-memory implementation
        __depends_on__: Components that must also be real when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
