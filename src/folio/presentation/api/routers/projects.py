"""Projects router."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, File, Query, UploadFile, status

from folio.application.commands import (
    AttachProjectThumbnailCommand,
    CreateProjectCommand,
    DeleteProjectCommand,
    UpdateProjectCommand,
)
from folio.application.dtos import MAX_LIMIT, ProjectDTO
from folio.application.queries import GetProjectQuery, ListProjectsQuery
from folio.presentation.api.dependencies import (
    PublicRepoFactory,
    RepoFactory,
    UploadService,
    read_image_upload,
)
from folio.presentation.api.schemas import (
    DataResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_featured(value: Optional[str]) -> Optional[bool]:
    """Any non-empty value filters; only the literal "true" selects featured."""
    if not value:
        return None
    return value == "true"


@router.get(
    "",
    summary="List projects",
    responses={200: {"description": "One page of projects ordered by order, then newest"}},
)
async def list_projects(
    factory: PublicRepoFactory,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = 10,
    featured: Annotated[
        Optional[str],
        Query(description='"true" for featured projects, any other value for the rest'),
    ] = None,
) -> PaginatedResponse[ProjectResponse]:
    result = await ListProjectsQuery.from_factory(factory).execute(
        page=page,
        limit=limit,
        featured=_parse_featured(featured),
    )
    return PaginatedResponse[ProjectResponse](
        data=[ProjectResponse.from_dto(dto) for dto in result.items],
        pagination=PaginationMeta.from_page(result),
    )


@router.get(
    "/featured",
    summary="List featured projects",
    responses={200: {"description": "All featured projects, unpaginated"}},
)
async def list_featured_projects(
    factory: PublicRepoFactory,
) -> DataResponse[list[ProjectResponse]]:
    projects = await ListProjectsQuery.from_factory(factory).featured()
    return DataResponse[list[ProjectResponse]](
        data=[ProjectResponse.from_dto(dto) for dto in projects],
    )


@router.get(
    "/{project_id}",
    summary="Get a project",
    responses={
        200: {"description": "The project"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    factory: PublicRepoFactory,
) -> DataResponse[ProjectResponse]:
    project = await GetProjectQuery.from_factory(factory).execute(project_id)
    return DataResponse[ProjectResponse](data=ProjectResponse.from_dto(project))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={
        201: {"description": "Project created"},
        400: {"description": "Invalid input"},
        401: {"description": "Not authenticated"},
    },
)
async def create_project(
    request: ProjectCreateRequest,
    factory: RepoFactory,
) -> DataResponse[ProjectResponse]:
    command = CreateProjectCommand.from_factory(factory)

    try:
        project = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[ProjectResponse](
        message="Project created successfully",
        data=ProjectResponse.from_dto(ProjectDTO.from_entity(project)),
    )


@router.put(
    "/{project_id}",
    summary="Update a project",
    responses={
        200: {"description": "Project updated"},
        400: {"description": "Invalid input"},
        401: {"description": "Not authenticated"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID,
    request: ProjectUpdateRequest,
    factory: RepoFactory,
) -> DataResponse[ProjectResponse]:
    command = UpdateProjectCommand.from_factory(factory)

    try:
        project = await command.execute(
            project_id=project_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[ProjectResponse](
        message="Project updated successfully",
        data=ProjectResponse.from_dto(ProjectDTO.from_entity(project)),
    )


@router.delete(
    "/{project_id}",
    summary="Delete a project",
    responses={
        200: {"description": "Project deleted"},
        401: {"description": "Not authenticated"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = DeleteProjectCommand.from_factory(factory)

    try:
        await command.execute(project_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Project deleted successfully")


@router.post(
    "/{project_id}/thumbnail",
    summary="Upload a thumbnail",
    responses={
        200: {"description": "Thumbnail stored"},
        400: {"description": "Missing, empty, oversized or non-image file"},
        401: {"description": "Not authenticated"},
        404: {"description": "Project not found"},
    },
)
async def upload_thumbnail(
    project_id: UUID,
    factory: RepoFactory,
    upload_service: UploadService,
    thumbnail: Annotated[Optional[UploadFile], File(description="Image file")] = None,
) -> DataResponse[ProjectResponse]:
    command = AttachProjectThumbnailCommand.from_factory(factory, upload_service)

    try:
        upload = await read_image_upload(thumbnail, upload_service.max_bytes)
        project = await command.execute(project_id, upload)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[ProjectResponse](
        message="Thumbnail uploaded successfully",
        data=ProjectResponse.from_dto(ProjectDTO.from_entity(project)),
    )
