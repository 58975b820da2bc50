"""Base classes for value objects."""

import re
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, field_validator


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The wrapped value is `.root` and model_dump() returns it unchanged, so
    these serialize as plain strings or numbers.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)


class PublicName(RootValueObject[str]):
    """Short public name, unique regardless of case.

    Subclasses set `label`, which is used in the validation message.
    """

    label: ClassVar[str] = "Name"
    pattern: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_]{3,20}$")

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not cls.pattern.match(v):
            raise ValueError(
                f"{cls.label} must be 3-20 characters of letters, digits or underscores"
            )
        return v

    @property
    def key(self) -> str:
        """Case-folded form used for uniqueness checks."""
        return self.root.lower()
