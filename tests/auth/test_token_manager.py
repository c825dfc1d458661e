"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt

from app.configs import settings
from app.managers.token_manager import create_access_token, decode_access_token


def encode(claims: dict) -> str:
    return jwt.encode(claims, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def base_claims(**overrides: object) -> dict:
    now = datetime.now(UTC)
    claims = {
        "sub": "testuser",
        "user_id": str(uuid4()),
        "jti": str(uuid4()),
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": "access",
    }
    claims.update(overrides)
    return claims


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_token_contains_correct_claims(self) -> None:
        user_id = uuid4()

        token_data = decode_access_token(create_access_token(user_id=user_id, username="testuser"))

        assert token_data is not None
        assert token_data.username == "testuser"
        assert token_data.user_id == user_id
        assert token_data.token_type == "access"
        assert token_data.jti

    def test_each_token_has_unique_jti(self) -> None:
        user_id = uuid4()
        first = decode_access_token(create_access_token(user_id=user_id, username="u"))
        second = decode_access_token(create_access_token(user_id=user_id, username="u"))

        assert first is not None
        assert second is not None
        assert first.jti != second.jti


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_expired_token_rejected(self) -> None:
        token = create_access_token(
            user_id=uuid4(),
            username="testuser",
            expires_delta=timedelta(seconds=-1),
        )
        assert decode_access_token(token) is None

    def test_garbage_rejected(self) -> None:
        assert decode_access_token("not.a.token") is None

    def test_wrong_audience_rejected(self) -> None:
        assert decode_access_token(encode(base_claims(aud="someone-else"))) is None

    def test_wrong_issuer_rejected(self) -> None:
        assert decode_access_token(encode(base_claims(iss="someone-else"))) is None

    def test_refresh_token_rejected(self) -> None:
        assert decode_access_token(encode(base_claims(type="refresh"))) is None

    def test_malformed_user_id_rejected(self) -> None:
        assert decode_access_token(encode(base_claims(user_id="not-a-uuid"))) is None

    def test_wrong_signature_rejected(self) -> None:
        token = jwt.encode(base_claims(), "another-secret", algorithm=settings.ALGORITHM)
        assert decode_access_token(token) is None
