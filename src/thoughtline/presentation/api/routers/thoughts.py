"""Thoughts router: feed, thought CRUD, comments and likes."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from thoughtline.application.commands import (
    AddCommentCommand,
    CreateThoughtCommand,
    DeleteThoughtCommand,
    ToggleLikeCommand,
    UpdateThoughtCommand,
)
from thoughtline.application.queries import (
    GetCommentQuery,
    GetThoughtQuery,
    ListCommentsQuery,
    ListThoughtsQuery,
)
from thoughtline.presentation.api.dependencies import RepoFactory
from thoughtline.presentation.api.schemas.base import SuccessResponse
from thoughtline.presentation.api.schemas.thoughts import (
    CommentCreateRequest,
    CommentResponse,
    LikeRequest,
    LikeResponse,
    ThoughtCreateRequest,
    ThoughtResponse,
    ThoughtUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Type aliases for query parameters using Annotated (modern FastAPI pattern)
AuthorFilter = Annotated[
    UUID | None,
    Query(alias="userId", description="Only thoughts written by this user"),
]
ViewerParam = Annotated[
    UUID | None,
    Query(alias="viewerId", description="User whose likes fill in isLiked"),
]
ActingUserParam = Annotated[
    UUID | None,
    Query(alias="userId", description="If given, only this user may delete"),
]


@router.get(
    "",
    summary="List thoughts",
    responses={200: {"description": "Thoughts, newest first"}},
)
async def list_thoughts(
    factory: RepoFactory,
    author_id: AuthorFilter = None,
    viewer_id: ViewerParam = None,
) -> list[ThoughtResponse]:
    """
    List the feed.

    Every item carries the author summary, live like and comment counts,
    and whether the viewer (``viewerId``) has liked it.
    """
    query = ListThoughtsQuery.from_factory(factory)
    items = await query.execute(viewer_id=viewer_id, author_id=author_id)
    return [ThoughtResponse.from_dto(item) for item in items]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Publish a thought",
    responses={
        201: {"description": "Thought created"},
        400: {"description": "Content missing, blank or longer than 280 chars"},
        404: {"description": "User not found"},
    },
)
async def create_thought(
    request: ThoughtCreateRequest,
    factory: RepoFactory,
) -> ThoughtResponse:
    command = CreateThoughtCommand.from_factory(factory)

    try:
        thought = await command.execute(
            user_id=request.user_id,
            content=request.content,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    item = await GetThoughtQuery.from_factory(factory).execute(
        thought.id,
        viewer_id=thought.user_id,
    )
    return ThoughtResponse.from_dto(item)


@router.put(
    "/{thought_id}",
    summary="Edit a thought",
    responses={
        200: {"description": "Thought updated"},
        400: {"description": "Content missing, blank or too long"},
        403: {"description": "userId given and not the author"},
        404: {"description": "Thought not found"},
    },
)
async def update_thought(
    thought_id: UUID,
    request: ThoughtUpdateRequest,
    factory: RepoFactory,
) -> ThoughtResponse:
    command = UpdateThoughtCommand.from_factory(factory)

    try:
        await command.execute(
            thought_id=thought_id,
            content=request.content,
            acting_user_id=request.user_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    item = await GetThoughtQuery.from_factory(factory).execute(
        thought_id,
        viewer_id=request.user_id,
    )
    return ThoughtResponse.from_dto(item)


@router.delete(
    "/{thought_id}",
    summary="Delete a thought",
    responses={
        200: {"description": "Thought and its likes and comments deleted"},
        403: {"description": "userId given and not the author"},
        404: {"description": "Thought not found"},
    },
)
async def delete_thought(
    thought_id: UUID,
    factory: RepoFactory,
    acting_user_id: ActingUserParam = None,
) -> SuccessResponse:
    command = DeleteThoughtCommand.from_factory(factory)

    try:
        await command.execute(thought_id=thought_id, acting_user_id=acting_user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Thought deleted: %s", thought_id)
    return SuccessResponse()


@router.get(
    "/{thought_id}/comments",
    summary="List comments of a thought",
    responses={200: {"description": "Comments, oldest first"}},
)
async def list_comments(
    thought_id: UUID,
    factory: RepoFactory,
) -> list[CommentResponse]:
    query = ListCommentsQuery.from_factory(factory)
    comments = await query.execute(thought_id)
    return [CommentResponse.from_dto(comment) for comment in comments]


@router.post(
    "/{thought_id}/comments",
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a thought",
    responses={
        201: {"description": "Comment created"},
        400: {"description": "Content or userId missing, or content too long"},
        404: {"description": "Thought or user not found"},
    },
)
async def add_comment(
    thought_id: UUID,
    request: CommentCreateRequest,
    factory: RepoFactory,
) -> CommentResponse:
    command = AddCommentCommand.from_factory(factory)

    try:
        comment = await command.execute(
            thought_id=thought_id,
            user_id=request.user_id,
            content=request.content,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    dto = await GetCommentQuery.from_factory(factory).execute(comment.id)
    return CommentResponse.from_dto(dto)


@router.post(
    "/{thought_id}/like",
    summary="Like or unlike a thought",
    responses={
        200: {"description": "New like state"},
        400: {"description": "userId missing"},
        404: {"description": "Thought or user not found"},
    },
)
async def toggle_like(
    thought_id: UUID,
    request: LikeRequest,
    factory: RepoFactory,
) -> LikeResponse:
    command = ToggleLikeCommand.from_factory(factory)

    try:
        liked = await command.execute(thought_id=thought_id, user_id=request.user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return LikeResponse(liked=liked)
