"""Authentication router for registration, login and token verification."""

import logging

from fastapi import APIRouter, Depends, status

from folio.application.dtos import ProfileDTO
from folio.presentation.api.dependencies import AuthService, CurrentUser, DBSession
from folio.presentation.api.rate_limit import enforce_auth_rate_limit
from folio.presentation.api.schemas import (
    DataResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register an account",
    dependencies=[Depends(enforce_auth_rate_limit)],
    responses={
        201: {"description": "Account created (log in to obtain a token)"},
        400: {"description": "Invalid input, weak password or password mismatch"},
        403: {"description": "Registration disabled"},
        409: {"description": "Email already registered"},
        429: {"description": "Too many authentication attempts"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> DataResponse[UserResponse]:
    """
    Create an account. No token is issued; call `/login` afterwards.
    """
    try:
        user = await auth_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return DataResponse[UserResponse](
        message="User registered successfully",
        data=UserResponse.from_dto(ProfileDTO.from_user(user)),
    )


@router.post(
    "/login",
    summary="Authenticate",
    dependencies=[Depends(enforce_auth_rate_limit)],
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many authentication attempts"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    Send it as `Authorization: Bearer <token>` on protected endpoints.
    """
    try:
        user, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return LoginResponse(
        token=token,
        data=UserResponse.from_dto(ProfileDTO.from_user(user)),
    )


@router.get(
    "/verify",
    summary="Verify token",
    responses={
        200: {"description": "Token is valid"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def verify(current_user: CurrentUser) -> DataResponse[UserResponse]:
    """Return the user the bearer token belongs to."""
    return DataResponse[UserResponse](
        data=UserResponse.from_dto(ProfileDTO.from_user(current_user)),
    )
