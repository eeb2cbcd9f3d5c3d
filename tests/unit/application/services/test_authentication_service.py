"""Unit tests for AuthenticationService."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from thoughtline.application.services import AuthenticationService
from thoughtline.domain.shared.exceptions import AuthenticationError, ValidationError
from thoughtline.domain.user import EmailAlreadyExistsError, User, UserNotFoundError
from thoughtline_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    WeakPasswordError,
)
from thoughtline_auth.repositories import UserCredentialData


def _payload(user_id):
    now = datetime.now(tz=timezone.utc)
    return TokenPayload(user_id=user_id, issued_at=now, exp=now + timedelta(days=7))


class TestSignUp:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.user_repo.exists_by_email.return_value = False
        self.credential_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "$2b$04$hash"
        self.jwt_service = Mock(spec=JWTService)
        self.jwt_service.create_token.return_value = "token-123"

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    async def test_sign_up_creates_user_and_credentials(self):
        user, token = await self.service.sign_up("a@x.com", "secret1", "Ann")

        assert user.email == "a@x.com"
        assert user.display_name == "Ann"
        assert token == "token-123"
        self.user_repo.save.assert_awaited_once_with(user)
        self.credential_repo.save.assert_awaited_once_with(
            user_id=user.id,
            password_hash="$2b$04$hash",
        )
        self.jwt_service.create_token.assert_called_once_with(user.id)

    async def test_password_is_never_stored_in_plaintext(self):
        await self.service.sign_up("a@x.com", "secret1")

        self.password_service.hash.assert_called_once_with("secret1")
        saved_hash = self.credential_repo.save.await_args.kwargs["password_hash"]
        assert saved_hash != "secret1"

    @pytest.mark.parametrize(
        ("email", "password"),
        [(None, "secret1"), ("a@x.com", None), ("", "secret1"), ("a@x.com", "")],
    )
    async def test_missing_fields_rejected(self, email, password):
        with pytest.raises(ValidationError, match="Email and password are required"):
            await self.service.sign_up(email, password)

        self.user_repo.save.assert_not_awaited()

    async def test_duplicate_email_rejected(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.sign_up("a@x.com", "secret1")

        self.user_repo.save.assert_not_awaited()
        self.credential_repo.save.assert_not_awaited()

    async def test_concurrent_duplicate_propagates(self):
        self.user_repo.save.side_effect = EmailAlreadyExistsError("a@x.com")

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.sign_up("a@x.com", "secret1")

        self.credential_repo.save.assert_not_awaited()

    async def test_unhashable_password_becomes_validation_error(self):
        self.password_service.hash.side_effect = WeakPasswordError(
            "Password cannot exceed 72 bytes",
        )

        with pytest.raises(ValidationError, match="72 bytes"):
            await self.service.sign_up("a@x.com", "x" * 100)


class TestSignIn:
    def setup_method(self):
        self.user = User.create(email="a@x.com")
        self.user_repo = AsyncMock()
        self.user_repo.find_by_email.return_value = self.user
        self.credential_repo = AsyncMock()
        self.credential_repo.find_by_user_id.return_value = UserCredentialData(
            user_id=self.user.id,
            password_hash="$2b$04$hash",
            last_login_at=None,
        )
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.verify.return_value = True
        self.password_service.needs_rehash.return_value = False
        self.jwt_service = Mock(spec=JWTService)
        self.jwt_service.create_token.return_value = "token-456"

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    async def test_successful_sign_in(self):
        user, token = await self.service.sign_in("a@x.com", "secret1")

        assert user == self.user
        assert token == "token-456"
        self.password_service.verify.assert_called_once_with("secret1", "$2b$04$hash")
        self.credential_repo.update_last_login.assert_awaited_once_with(self.user.id)
        self.credential_repo.save.assert_not_awaited()

    async def test_outdated_hash_is_replaced(self):
        self.password_service.needs_rehash.return_value = True
        self.password_service.hash.return_value = "$2b$12$fresh"

        await self.service.sign_in("a@x.com", "secret1")

        self.password_service.needs_rehash.assert_called_once_with("$2b$04$hash")
        self.password_service.hash.assert_called_once_with("secret1")
        self.credential_repo.save.assert_awaited_once_with(
            user_id=self.user.id,
            password_hash="$2b$12$fresh",
        )

    async def test_wrong_password(self):
        self.password_service.verify.return_value = False

        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await self.service.sign_in("a@x.com", "wrong")

        self.jwt_service.create_token.assert_not_called()
        self.credential_repo.update_last_login.assert_not_awaited()

    async def test_unknown_email_fails_like_wrong_password(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await self.service.sign_in("nobody@x.com", "secret1")

        self.password_service.verify_against_dummy.assert_called_once_with("secret1")

    async def test_missing_credentials_row_fails(self):
        self.credential_repo.find_by_user_id.return_value = None

        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await self.service.sign_in("a@x.com", "secret1")

    async def test_missing_fields_rejected(self):
        with pytest.raises(ValidationError):
            await self.service.sign_in("a@x.com", None)

        self.user_repo.find_by_email.assert_not_awaited()


class TestVerify:
    def setup_method(self):
        self.user = User.create(email="a@x.com")
        self.user_repo = AsyncMock()
        self.user_repo.find_by_id.return_value = self.user
        self.jwt_service = Mock(spec=JWTService)
        self.jwt_service.verify_token.return_value = _payload(self.user.id)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=AsyncMock(),
            password_service=Mock(spec=PasswordHashingService),
            jwt_service=self.jwt_service,
        )

    async def test_valid_token_returns_user(self):
        user = await self.service.verify("good-token")

        assert user == self.user
        self.user_repo.find_by_id.assert_awaited_once_with(self.user.id)

    async def test_missing_token(self):
        with pytest.raises(ValidationError, match="Token is required"):
            await self.service.verify(None)

    async def test_invalid_token(self):
        self.jwt_service.verify_token.side_effect = InvalidTokenError(
            "Token has expired",
        )

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await self.service.verify("expired")

        self.user_repo.find_by_id.assert_not_awaited()

    async def test_token_for_deleted_user(self):
        self.user_repo.find_by_id.return_value = None
        self.jwt_service.verify_token.return_value = _payload(uuid4())

        with pytest.raises(UserNotFoundError):
            await self.service.verify("orphan")
