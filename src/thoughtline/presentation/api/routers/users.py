"""Users router: profile updates."""

import logging
from uuid import UUID

from fastapi import APIRouter

from thoughtline.application.commands import UpdateProfileCommand
from thoughtline.presentation.api.dependencies import RepoFactory
from thoughtline.presentation.api.schemas.users import (
    ProfileUpdateRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put(
    "/{user_id}",
    summary="Update a user's profile",
    responses={
        200: {"description": "Updated profile"},
        400: {"description": "displayName over 50 or bio over 160 characters"},
        404: {"description": "User not found"},
    },
)
async def update_profile(
    user_id: UUID,
    request: ProfileUpdateRequest,
    factory: RepoFactory,
) -> UserResponse:
    """
    Partially update ``displayName`` and ``bio``.

    Fields absent from the body are left untouched; ``null`` clears a field.
    """
    command = UpdateProfileCommand.from_factory(factory)

    try:
        user = await command.execute(
            user_id=user_id,
            changes=request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_domain(user)
