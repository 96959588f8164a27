"""Request authentication helpers.

Tokens come from the ``auth_token`` cookie or an ``Authorization: Bearer``
header.
"""

from fastapi import HTTPException, status

from agora.domain.service import JWTService


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the token from the cookie, falling back to the bearer header."""
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return None


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> str:
    """Return the authenticated user ID.

    Raises:
        HTTPException: 401 if no valid token was sent
    """
    user_id = jwt_service.get_user_id_from_token(
        extract_token(auth_token, authorization)
    )
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return str(user_id)
