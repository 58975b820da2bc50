"""Validation predicates shared by the domain and interface layers."""

from uuid import UUID

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from threadly.domain.error import ValidationError

_http_url_adapter = TypeAdapter(HttpUrl)


def is_valid_url(value: str | None) -> bool:
    """Check whether a string is an absolute http(s) URL.

    Args:
        value: Candidate URL

    Returns:
        True if the value parses as an http or https URL with a host
    """
    if not value:
        return False
    try:
        _http_url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def parse_id(value: str, resource: str = "ID") -> UUID:
    """Parse an opaque identifier.

    Args:
        value: Raw identifier, typically from a URL path
        resource: Name used in the error message

    Returns:
        The parsed UUID

    Raises:
        ValidationError: If the value is not a well-formed id
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Malformed {resource}: '{value}'.")
