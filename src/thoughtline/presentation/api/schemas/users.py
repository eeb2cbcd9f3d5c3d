"""User profile schemas."""

from uuid import UUID

from pydantic import ConfigDict, Field

from thoughtline.domain.user import User
from thoughtline.presentation.api.schemas.base import CamelModel


class UserResponse(CamelModel):
    """Public view of a user. Never contains credentials."""

    id: UUID
    email: str
    display_name: str | None = None
    bio: str | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            display_name=user.display_name,
            bio=user.bio,
        )


class ProfileUpdateRequest(CamelModel):
    """Partial profile update.

    Only the fields present in the request body change. Sending ``null``
    clears a field; omitting it leaves the stored value alone.
    """

    display_name: str | None = Field(default=None, description="Up to 50 characters")
    bio: str | None = Field(default=None, description="Up to 160 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "displayName": "Ada",
                "bio": "Thinking out loud.",
            },
        },
    )
