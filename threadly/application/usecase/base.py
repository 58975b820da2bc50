"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation, from a transport request to a response view.

    Requests carry ids as plain strings straight from the URL or token. The
    use case parses them into domain ids, so a malformed id fails with a
    ValidationError before any service is called.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
