"""Access token domain service."""

import logfire

from threadly.config import AuthSettings
from threadly.domain.value import UserId
from threadly.util.jwt import JWTError, TokenPayload, decode_token, encode_token

from .base import Service


class JWTService(Service):
    """Resolves the acting user from an access token.

    Tokens are signed by the identity service with the shared secret. Only
    trusted callers (tests, operator scripts) mint tokens here.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str | None = None) -> str:
        """Mint an access token for a user.

        Args:
            user_id: User ID
            username: Optional display name claim

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return encode_token(user_id, username, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = decode_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Access token rejected", error=str(e))
                raise
            logfire.info("Access token verified", user_id=str(payload.user_id))
            return payload

    def resolve_user_id(self, token: str | None) -> UserId | None:
        """Acting user for a request, None when unauthenticated.

        A missing, expired or malformed token all count as unauthenticated.
        """
        if not token:
            return None

        try:
            return UserId(self.verify_token(token).user_id)
        except JWTError:
            return None
