"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from thoughtline_auth.exceptions import InvalidTokenError
from thoughtline_auth.services import JWTService


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key="test-secret-key")
        assert service.token_lifetime == timedelta(days=7)

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_init_with_custom_expiry(self):
        service = JWTService(secret_key="test-secret", token_expire_days=1)
        assert service.token_lifetime == timedelta(days=1)


class TestSessionTokens:
    """Tests for token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key="test-secret-key-12345")
        self.user_id = uuid4()

    def test_create_token_returns_string(self):
        token = self.service.create_token(self.user_id)

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_verify_round_trips_user_id(self):
        token = self.service.create_token(self.user_id)

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert not payload.is_expired()

    def test_token_expires_after_seven_days(self):
        before = datetime.now(tz=timezone.utc)
        token = self.service.create_token(self.user_id)

        payload = self.service.verify_token(token)

        lifetime = payload.exp - before
        assert timedelta(days=7) - timedelta(seconds=5) <= lifetime
        assert lifetime <= timedelta(days=7) + timedelta(seconds=5)

    def test_token_is_hs256_signed(self):
        token = self.service.create_token(self.user_id)

        header = jwt.get_unverified_header(token)

        assert header["alg"] == "HS256"

    def test_verify_expired_token_raises(self):
        token = self.service.create_token(
            self.user_id,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_token_older_than_seven_days_is_rejected(self):
        """A token issued eight days ago is no longer accepted."""
        issued = datetime.now(tz=timezone.utc) - timedelta(days=8)
        token = jwt.encode(
            {
                "sub": str(self.user_id),
                "iat": issued,
                "exp": issued + timedelta(days=7),
            },
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_invalid_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_tampered_token_raises(self):
        token = self.service.create_token(self.user_id)
        header, payload, signature = token.split(".")
        # Flip one character of the signature
        flipped = "A" if signature[0] != "A" else "B"
        tampered = f"{header}.{payload}.{flipped}{signature[1:]}"

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_verify_token_signed_with_other_secret_raises(self):
        other = JWTService(secret_key="some-other-secret")
        token = other.create_token(self.user_id)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_token_without_subject_raises(self):
        token = jwt.encode(
            {"exp": datetime.now(tz=timezone.utc) + timedelta(hours=1)},
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_token_with_non_uuid_subject_raises(self):
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "exp": datetime.now(tz=timezone.utc) + timedelta(hours=1),
            },
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_verify_empty_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("")
