"""User aggregate: public identity and profile."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from thoughtline.domain.shared.time import utc_now
from thoughtline.domain.user.exceptions import InvalidProfileError

MAX_DISPLAY_NAME_LENGTH = 50
MAX_BIO_LENGTH = 160

_UNSET: Any = object()


def _normalize_optional_text(value: str | None) -> str | None:
    # Empty strings are stored as null
    if value is None or value == "":
        return None
    return value


class User:
    """
    User aggregate root.

    Holds the public profile only. The password hash lives with the
    credentials in the auth package and never passes through this object.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: str,
        display_name: str | None = None,
        bio: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email
        self._display_name = self._validate_display_name(display_name)
        self._bio = self._validate_bio(bio)
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def display_name(self) -> str | None:
        return self._display_name

    @property
    def bio(self) -> str | None:
        return self._bio

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        display_name: str | None = _UNSET,
        bio: str | None = _UNSET,
    ) -> bool:
        """
        Apply a partial profile update.

        Only the arguments that are passed change; passing ``None`` clears
        the field. Both values are validated before either is applied.

        Returns
        -------
        True if anything was supplied
        """
        new_display_name = self._display_name
        new_bio = self._bio

        if display_name is not _UNSET:
            new_display_name = self._validate_display_name(display_name)
        if bio is not _UNSET:
            new_bio = self._validate_bio(bio)

        changed = display_name is not _UNSET or bio is not _UNSET
        self._display_name = new_display_name
        self._bio = new_bio
        if changed:
            self._updated_at = utc_now()
        return changed

    @staticmethod
    def _validate_display_name(value: str | None) -> str | None:
        value = _normalize_optional_text(value)
        if value is not None and len(value) > MAX_DISPLAY_NAME_LENGTH:
            msg = (
                f"Display name cannot exceed {MAX_DISPLAY_NAME_LENGTH} characters"
            )
            raise InvalidProfileError(msg, details={"field": "displayName"})
        return value

    @staticmethod
    def _validate_bio(value: str | None) -> str | None:
        value = _normalize_optional_text(value)
        if value is not None and len(value) > MAX_BIO_LENGTH:
            msg = f"Bio cannot exceed {MAX_BIO_LENGTH} characters"
            raise InvalidProfileError(msg, details={"field": "bio"})
        return value

    @classmethod
    def create(
        cls,
        email: str,
        display_name: str | None = None,
    ) -> "User":
        return cls(email=email, display_name=display_name)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: str,
        display_name: str | None,
        bio: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            display_name=display_name,
            bio=bio,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
