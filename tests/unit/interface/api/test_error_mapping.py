"""Unit tests for mapping errors to HTTP status codes."""

import pytest

from threadly.domain.error import (
    ConcurrentUpdateError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    PayloadTooLargeError,
    ValidationError,
)
from threadly.interface.error import AuthenticationError, status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (NotFoundError("Post", "123"), 404),
            (NotAuthorizedError("post", "123", "456"), 401),
            (ValidationError("Post title can't be empty."), 400),
            (PayloadTooLargeError("Text submission too long"), 413),
            (ConflictError("User", "username", "alice"), 409),
            (ConcurrentUpdateError("Post", "123"), 409),
            (AuthenticationError("Authentication required"), 401),
            (RuntimeError("boom"), 500),
        ],
    )
    def test_status(self, error, status_code):
        assert status_for(error) == status_code
