"""Unit tests for security utilities (password hashing and JWT tokens)."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import JWTError, jwt

from remarkbook.config import settings
from remarkbook.core.security import (
    create_access_token,
    decode_token,
    get_user_id_from_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Test password hashing functions."""

    def test_hash_password(self):
        """Password is never stored in plain text."""
        password = "secret1"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$argon2")

    def test_verify_password_correct(self):
        hashed = hash_password("secret1")
        assert verify_password("secret1", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("secret1")
        assert verify_password("secret2", hashed) is False

    def test_hash_same_password_different_hashes(self):
        """Hashing is salted."""
        hash1 = hash_password("secret1")
        hash2 = hash_password("secret1")

        assert hash1 != hash2
        assert verify_password("secret1", hash1) is True
        assert verify_password("secret1", hash2) is True


class TestJWTTokens:
    """Test JWT token creation and validation."""

    def test_create_access_token(self):
        user_id = uuid4()
        token = create_access_token(user_id)

        payload = decode_token(token)
        assert payload["sub"] == str(user_id)
        assert payload["type"] == "access"
        assert "exp" in payload

    def test_token_expires_after_thirty_days(self):
        """Default validity is fixed at JWT_EXPIRE_DAYS (30)."""
        before = datetime.now(timezone.utc)
        payload = decode_token(create_access_token(uuid4()))
        expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)

        assert settings.jwt_expire_days == 30
        delta = expires_at - before
        assert timedelta(days=29, hours=23) < delta <= timedelta(days=30, seconds=5)

    def test_expired_token_rejected(self):
        token = create_access_token(uuid4(), expires_delta=timedelta(seconds=-10))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_decode_invalid_token(self):
        with pytest.raises(JWTError):
            decode_token("invalid.token.string")

    def test_decode_tampered_token(self):
        token = create_access_token(uuid4())
        tampered_token = token[:-5] + "XXXXX"

        with pytest.raises(JWTError):
            decode_token(tampered_token)

    def test_token_signed_with_other_secret_rejected(self):
        forged = jwt.encode(
            {"sub": str(uuid4()), "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            "some-other-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            decode_token(forged)

    def test_get_user_id_from_token(self):
        user_id = uuid4()
        assert get_user_id_from_token(create_access_token(user_id)) == user_id

    def test_get_user_id_missing_subject(self):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            get_user_id_from_token(token)

    def test_get_user_id_not_a_uuid(self):
        token = jwt.encode(
            {"sub": "42", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(ValueError):
            get_user_id_from_token(token)
