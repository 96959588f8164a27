"""Session token service."""

from uuid import UUID

import logfire

from agora.config import AuthSettings
from agora.domain.value import UserId
from agora.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Resolves session tokens to users.

    Holds no per-request state, so one instance serves HTTP routes and the
    WebSocket endpoint alike.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, name: str) -> str:
        """Mint a token the way the accounts service does."""
        return create_token(str(user_id), name, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Return the token's claims.

        Raises:
            JWTError: If the token is expired or not signed with our secret
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Rejected session token", reason=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """The authenticated user, or None for a missing or unusable token."""
        if not token:
            return None

        try:
            return UserId(UUID(self.verify_token(token).user_id))
        except (JWTError, ValueError) as e:
            logfire.debug("Treating request as anonymous", reason=str(e))
            return None
