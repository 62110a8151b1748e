"""Encoding and decoding of ``auth_token`` cookies.

The login flow lives outside this service; tokens only need to agree on
the secret, the algorithm and the payload below.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from askabout.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an auth token."""

    user_id: str
    handle: str
    exp: datetime


class JWTError(Exception):
    """Token is malformed, badly signed, expired or missing claims."""


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Sign a token for a user, valid for ``settings.jwt_expiry_days``."""
    expires = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "handle": handle, "exp": expires}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
