"""Request authentication helpers."""

from threadly.domain.service import JWTService
from threadly.interface.error import AuthenticationError


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the authenticated user from the auth cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Returns:
        User ID carried by the token

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    user_id = jwt_service.resolve_user_id(auth_token)
    if user_id is None:
        raise AuthenticationError("Authentication required")
    return str(user_id)
