"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class PayloadTooLargeError(DomainError):
    """Raised when submitted content exceeds its size limit.

    Kept apart from ValidationError so callers can answer with 413.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a unique field (username, subreddit name) is already taken."""

    def __init__(self, resource: str, field: str, value: str):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} with {field} '{value}' already exists.")


class ConcurrentUpdateError(DomainError):
    """Raised when an aggregate changed between load and save."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{resource} {resource_id} was modified by another request. Please retry."
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Access is denied. Not the author of {resource} {resource_id}.")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    The message names the missing entity, e.g.
    "Post with ID: <id> does not exist in database." or, without an
    identifier, "User does not exist in database."
    """

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        message: str | None = None,
    ):
        self.resource = resource
        self.identifier = identifier
        if message is None:
            if identifier is None:
                message = f"{resource} does not exist in database."
            else:
                message = f"{resource} with ID: {identifier} does not exist in database."
        super().__init__(message)
