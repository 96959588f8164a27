"""HS256 session tokens shared with the accounts service.

The accounts service signs ``{"user_id", "name", "exp"}`` with the shared
secret; the chatroom only has to check the signature and expiry. Minting is
kept here for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from agora.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    name: str
    exp: datetime


class JWTError(Exception):
    """The token is malformed, forged or expired."""


def create_token(user_id: str, name: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` valid for ``settings.jwt_expiry_days``."""
    claims = TokenPayload(
        user_id=user_id,
        name=name,
        exp=datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If the token is expired, badly signed or missing claims
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValueError as e:
        raise JWTError("Invalid token") from e
