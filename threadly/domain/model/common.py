"""Base models for domain entities."""

from datetime import datetime, timezone
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class AggregateRoot(DomainModel):
    """Entity that is loaded and saved as a unit.

    version counts successful saves and is 0 for an aggregate that was never
    stored. Repositories only write an aggregate whose version still matches
    the stored one.
    """

    version: int = Field(default=0, ge=0)

    @property
    def is_new(self) -> bool:
        return self.version == 0

    def next_version(self) -> Self:
        """Copy carrying the version the store holds after this save."""
        return self.model_copy(update={"version": self.version + 1})


def utc_now() -> datetime:
    """Current time, timezone-aware in UTC."""
    return datetime.now(timezone.utc)
