"""Access token encoding and decoding.

An access token names the calling user. Threadly never stores tokens; it
checks the signature and expiry on every request.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from threadly.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: UUID
    username: str | None = None
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Token is missing a claim, badly signed or expired."""

    pass


def encode_token(
    user_id: UUID | str, username: str | None, settings: AuthSettings
) -> str:
    """Sign an access token for a user.

    Args:
        user_id: User ID placed in the user_id claim
        username: Optional display name claim
        settings: Authentication settings (secret, algorithm, lifetime)

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    payload = {
        "user_id": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    if username is not None:
        payload["username"] = username

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check an access token and return its claims.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Token payload with a parsed user id

    Raises:
        JWTError: If the token is expired, badly signed, missing a required
            claim or carries a user_id that is not a UUID
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload(**claims)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the '{e.claim}' claim")
    except (jwt.InvalidTokenError, PydanticValidationError):
        raise JWTError("Invalid token")
