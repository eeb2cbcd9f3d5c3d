"""Authentication service for sign-up, sign-in and token verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from thoughtline.domain.shared.exceptions import AuthenticationError, ValidationError
from thoughtline.domain.user import EmailAlreadyExistsError, User, UserNotFoundError
from thoughtline_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    WeakPasswordError,
)
from thoughtline_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from thoughtline.domain.user import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates thoughtline_auth infrastructure (password hashing, JWT
    tokens) with the User domain to provide:
    - Sign-up
    - Sign-in with password
    - Session token verification

    Auth-infrastructure exceptions never leave this class; they are
    translated into domain exceptions the API layer knows how to render.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def sign_up(
        self,
        email: str | None,
        password: str | None,
        display_name: str | None = None,
    ) -> tuple[User, str]:
        """
        Register a new user and issue a session token.

        Raises
        ------
        ValidationError
            If email or password is missing or the password cannot be hashed
        EmailAlreadyExistsError
            If the email is already registered
        """
        if not email or not password:
            msg = "Email and password are required"
            raise ValidationError(msg)

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        try:
            password_hash = self._password_service.hash(password)
        except WeakPasswordError as e:
            raise ValidationError(str(e)) from e

        user = User.create(email, display_name=display_name)
        # Raises EmailAlreadyExistsError if a concurrent sign-up won the race
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        token = self._jwt_service.create_token(user.id)

        logger.info("User signed up: %s (id: %s)", email, user.id)
        return user, token

    async def sign_in(
        self,
        email: str | None,
        password: str | None,
    ) -> tuple[User, str]:
        """
        Authenticate with email and password and issue a fresh token.

        Unknown emails and wrong passwords fail identically.
        """
        if not email or not password:
            msg = "Email and password are required"
            raise ValidationError(msg)

        user = await self._user_repo.find_by_email(email)
        if user is None:
            self._password_service.verify_against_dummy(password)
            logger.info("Sign-in failed for unknown email: %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None or not self._password_service.verify(
            password,
            credential.password_hash,
        ):
            logger.info("Sign-in failed for user: %s", user.id)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        # Hashes from an older work factor are upgraded while the password is at hand
        if self._password_service.needs_rehash(credential.password_hash):
            await self._credential_repo.save(
                user_id=user.id,
                password_hash=self._password_service.hash(password),
            )
            logger.info("Rehashed password for user: %s", user.id)

        await self._credential_repo.update_last_login(user.id)
        token = self._jwt_service.create_token(user.id)

        logger.info("User signed in: %s", email)
        return user, token

    async def verify(self, token: str | None) -> User:
        """
        Resolve a session token to the user it was issued for.

        Raises
        ------
        ValidationError
            If no token is given
        AuthenticationError
            If the token is invalid, tampered with or expired
        UserNotFoundError
            If the token is valid but the user no longer exists
        """
        if not token:
            msg = "Token is required"
            raise ValidationError(msg)

        try:
            payload = self._jwt_service.verify_token(token)
        except InvalidTokenError as e:
            logger.debug("Token rejected: %s", e.message)
            raise AuthenticationError("Invalid token") from e

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            raise UserNotFoundError(payload.user_id)

        return user
