"""Interface layer errors and the HTTP error envelope.

Every failure leaves the API as {"message": str}. Domain errors are mapped
to a status code by type; anything unexpected becomes a generic 500 and is
logged with its traceback.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware

from threadly.domain.error import (
    ConcurrentUpdateError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PayloadTooLargeError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Request carries no valid auth token."""

    pass


class ErrorResponse(BaseModel):
    """Error envelope."""

    message: str


# First match wins
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_401_UNAUTHORIZED),
    (PayloadTooLargeError, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE),
    (ConcurrentUpdateError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: Exception) -> int:
    """HTTP status for an error, 500 if it is not a known error type."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(message=message).model_dump()
    )


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Turn errors raised by routes into the error envelope.

    Must wrap the DI container middleware. The exception then closes the
    request scope on its way out, and the session provider rolls back on
    it before the error becomes a response.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except (DomainError, InterfaceError) as e:
            status_code = status_for(e)
            logfire.info(
                "Request failed",
                path=request.url.path,
                error_type=type(e).__name__,
                status_code=status_code,
                message=str(e),
            )
            return error_response(status_code, str(e))
        except Exception:
            logfire.exception("Unhandled error", path=request.url.path)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
            )


def register_error_handlers(app: FastAPI) -> None:
    """Register the envelope for errors raised by FastAPI itself.

    Call after the DI middleware has been set up.

    Args:
        app: FastAPI application
    """

    async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'Invalid request')}" if location else "Invalid request"
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_middleware(ErrorEnvelopeMiddleware)
