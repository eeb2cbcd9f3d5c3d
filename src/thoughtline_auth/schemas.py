"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user the token was issued to
    issued_at
        Token issue timestamp
    exp
        Token expiration timestamp
    """

    user_id: UUID
    issued_at: datetime
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
