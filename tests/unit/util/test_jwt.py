"""Unit tests for JWT helpers and the JWT service."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.error import JWTError
from forum.util.jwt import create_token, verify_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret")


class TestJWT:
    """Tests for token creation and verification."""

    def test_round_trip(self, auth_settings):
        token = create_token("user-1", auth_settings, username="dicoding")

        payload = verify_token(token, auth_settings)

        assert payload.id == "user-1"
        assert payload.username == "dicoding"

    def test_wrong_secret(self, auth_settings):
        token = create_token("user-1", AuthSettings(jwt_secret="other-secret"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, auth_settings)

    def test_expired(self, auth_settings):
        token = jwt.encode(
            {"id": "user-1", "exp": datetime.now(timezone.utc) - timedelta(hours=1)},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_token_without_user_id(self, auth_settings):
        token = jwt.encode(
            {"username": "x"},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            verify_token(token, auth_settings)


class TestJWTService:
    """Tests for reading the user id from the Authorization header."""

    def test_bearer_header(self, auth_settings):
        service = JWTService(auth_settings)
        token = create_token("user-1", auth_settings)

        assert service.get_user_id_from_header(f"Bearer {token}") == "user-1"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer nope"])
    def test_unauthenticated_headers(self, auth_settings, header):
        service = JWTService(auth_settings)

        assert service.get_user_id_from_header(header) is None
