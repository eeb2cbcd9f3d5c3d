"""JWT token service.

Provides session token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from thoughtline_auth.exceptions import InvalidTokenError
from thoughtline_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are stateless: they carry the user id and an expiry and are
    verified with the signing secret alone. Rotating the secret
    invalidates every outstanding token.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_token(user_id)
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        token_expire_days: int = DEFAULT_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        token_expire_days
            Days until a token expires (default 7)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(days=token_expire_days)

    @property
    def token_lifetime(self) -> timedelta:
        return self._expire

    def create_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed session token for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )

            user_id = UUID(payload["sub"])
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            issued_at = datetime.fromtimestamp(
                payload.get("iat", payload["exp"]),
                tz=timezone.utc,
            )

            return TokenPayload(user_id=user_id, issued_at=issued_at, exp=exp)

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
