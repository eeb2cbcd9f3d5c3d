"""Authentication router for sign-up, sign-in and token verification."""

import logging

from fastapi import APIRouter, status

from thoughtline.presentation.api.dependencies import AuthService, DBSession
from thoughtline.presentation.api.schemas.auth import (
    AuthResponse,
    SignInRequest,
    SignUpRequest,
    VerifyRequest,
    VerifyResponse,
)
from thoughtline.presentation.api.schemas.users import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/sign-up",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered, session token issued"},
        400: {"description": "Email or password missing"},
        409: {"description": "Email already registered"},
    },
)
async def sign_up(
    request: SignUpRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Create an account and return the user with a 7-day session token.

    The password is stored only as a bcrypt hash and is never returned.
    """
    try:
        user, token = await auth_service.sign_up(
            email=request.email,
            password=request.password,
            display_name=request.display_name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return AuthResponse(user=UserResponse.from_domain(user), token=token)


@router.post(
    "/sign-in",
    summary="Sign in with email and password",
    responses={
        200: {"description": "Signed in, fresh session token issued"},
        400: {"description": "Email or password missing"},
        401: {"description": "Invalid email or password"},
    },
)
async def sign_in(
    request: SignInRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    try:
        user, token = await auth_service.sign_in(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return AuthResponse(user=UserResponse.from_domain(user), token=token)


@router.post(
    "/verify",
    summary="Resolve a session token to its user",
    responses={
        200: {"description": "Token valid"},
        400: {"description": "Token missing"},
        401: {"description": "Token invalid or expired"},
        404: {"description": "User no longer exists"},
    },
)
async def verify(
    request: VerifyRequest,
    auth_service: AuthService,
) -> VerifyResponse:
    user = await auth_service.verify(request.token)
    return VerifyResponse(user=UserResponse.from_domain(user))
