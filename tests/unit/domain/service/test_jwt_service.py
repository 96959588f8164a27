"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from agora.config import AuthSettings
from agora.domain.service import JWTService
from agora.domain.value import UserId
from agora.util.jwt import JWTError

SECRET = "unit-test-secret-of-at-least-32-bytes"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret=SECRET))


class TestTokens:
    """Tests for token creation and verification."""

    def test_round_trip_returns_user_id(self, jwt_service):
        """A freshly minted token resolves to the same user."""
        user_id = UserId(uuid4())

        token = jwt_service.create_token(user_id, "alice")

        assert jwt_service.get_user_id_from_token(token) == user_id
        assert jwt_service.verify_token(token).name == "alice"

    def test_missing_token_is_unauthenticated(self, jwt_service):
        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("") is None

    def test_wrong_secret_is_rejected(self, jwt_service):
        """Tokens signed with another secret do not verify."""
        other = JWTService(AuthSettings(jwt_secret="another-secret-of-at-least-32-bytes"))
        token = other.create_token(UserId(uuid4()), "mallory")

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)
        assert jwt_service.get_user_id_from_token(token) is None

    def test_expired_token_is_rejected(self, jwt_service):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "name": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_non_uuid_subject_is_unauthenticated(self, jwt_service):
        """A valid signature over a malformed user ID still yields no user."""
        token = jwt.encode(
            {
                "user_id": "not-a-uuid",
                "name": "alice",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            SECRET,
            algorithm="HS256",
        )

        assert jwt_service.get_user_id_from_token(token) is None
