"""Profile router: the single public profile of the portfolio owner."""

from typing import Annotated, Optional

from fastapi import APIRouter, File, UploadFile

from folio.application.commands import AttachAvatarCommand, UpdateProfileCommand
from folio.application.dtos import ProfileDTO
from folio.application.queries import GetProfileQuery
from folio.presentation.api.dependencies import (
    PublicRepoFactory,
    RepoFactory,
    UploadService,
    read_image_upload,
)
from folio.presentation.api.schemas import (
    AvatarResponse,
    DataResponse,
    ProfileUpdateRequest,
    UserResponse,
)

router = APIRouter()


@router.get(
    "",
    summary="Get the public profile",
    responses={
        200: {"description": "The first registered user's profile"},
        404: {"description": "No user registered yet"},
    },
)
async def get_profile(factory: PublicRepoFactory) -> DataResponse[UserResponse]:
    profile = await GetProfileQuery.from_factory(factory).execute()
    return DataResponse[UserResponse](data=UserResponse.from_dto(profile))


@router.put(
    "",
    summary="Update own profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid input"},
        401: {"description": "Not authenticated"},
    },
)
async def update_profile(
    request: ProfileUpdateRequest,
    factory: RepoFactory,
) -> DataResponse[UserResponse]:
    """
    Update the authenticated user's profile.

    Blank fields are ignored; social links are merged into the stored ones.
    """
    command = UpdateProfileCommand.from_factory(factory)

    try:
        user = await command.execute(
            name=request.name,
            title=request.title,
            bio=request.bio,
            social_links=request.social_links,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[UserResponse](
        message="Profile updated successfully",
        data=UserResponse.from_dto(ProfileDTO.from_user(user)),
    )


@router.post(
    "/avatar",
    summary="Upload an avatar",
    responses={
        200: {"description": "Avatar stored"},
        400: {"description": "Missing, empty, oversized or non-image file"},
        401: {"description": "Not authenticated"},
    },
)
async def upload_avatar(
    factory: RepoFactory,
    upload_service: UploadService,
    avatar: Annotated[Optional[UploadFile], File(description="Image file")] = None,
) -> DataResponse[AvatarResponse]:
    command = AttachAvatarCommand.from_factory(factory, upload_service)

    try:
        upload = await read_image_upload(avatar, upload_service.max_bytes)
        user = await command.execute(upload)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[AvatarResponse](
        message="Avatar uploaded successfully",
        data=AvatarResponse(avatar=user.avatar),
    )
