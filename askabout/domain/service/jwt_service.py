"""Auth token domain service."""

import logfire

from askabout.config import AuthSettings
from askabout.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Reads the acting user from ``auth_token`` cookies.

    Tokens are issued by the external login flow; ``create_token`` exists
    for that flow and for tests.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, handle: str) -> str:
        """Sign a token for a user."""
        token = create_token(user_id, handle, self.auth_settings)
        logfire.info("Auth token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the token's user ID, or None when there is no usable token.

        Routes treat None as an anonymous caller.
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Rejected auth token", reason=str(e))
            return None
