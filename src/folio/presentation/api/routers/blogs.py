"""Blogs router: public reading, authenticated authoring."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, File, Query, UploadFile, status

from folio.application.commands import (
    AttachBlogCoverCommand,
    CreateBlogCommand,
    DeleteBlogCommand,
    UpdateBlogCommand,
)
from folio.application.dtos import MAX_LIMIT, BlogDTO
from folio.application.queries import GetBlogBySlugQuery, ListBlogsQuery
from folio.presentation.api.dependencies import (
    MarkdownRendererDep,
    PublicRepoFactory,
    RepoFactory,
    UploadService,
    read_image_upload,
)
from folio.presentation.api.schemas import (
    BlogCreateRequest,
    BlogResponse,
    BlogUpdateRequest,
    DataResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Type aliases for query parameters using Annotated (modern FastAPI pattern)
PageParam = Annotated[int, Query(ge=1, description="Page number (1-based)")]
LimitParam = Annotated[
    int,
    Query(ge=1, le=MAX_LIMIT, description=f"Items per page (max {MAX_LIMIT})"),
]
SearchParam = Annotated[
    Optional[str],
    Query(description="Space-separated terms matched against title, body and tags"),
]
TagParam = Annotated[Optional[str], Query(description="Exact tag to filter on")]


def _to_response(blog_dto: BlogDTO) -> BlogResponse:
    return BlogResponse.from_dto(blog_dto)


@router.get(
    "",
    summary="List published blogs",
    response_model_exclude_none=True,
    responses={200: {"description": "One page of published blogs, newest first"}},
)
async def list_blogs(  # NOQA: PLR0913
    factory: PublicRepoFactory,
    page: PageParam = 1,
    limit: LimitParam = 10,
    search: SearchParam = None,
    tag: TagParam = None,
) -> PaginatedResponse[BlogResponse]:
    """
    List published blogs. The markdown body is omitted; fetch a single blog
    by slug to read it.
    """
    result = await ListBlogsQuery.from_factory(factory).execute(
        page=page,
        limit=limit,
        search=search,
        tag=tag,
    )
    return PaginatedResponse[BlogResponse](
        data=[_to_response(dto) for dto in result.items],
        pagination=PaginationMeta.from_page(result),
    )


@router.get(
    "/admin/all",
    summary="List all blogs including drafts",
    responses={
        200: {"description": "One page of blogs, drafts included"},
        401: {"description": "Not authenticated"},
    },
)
async def list_all_blogs(  # NOQA: PLR0913
    factory: RepoFactory,
    page: PageParam = 1,
    limit: LimitParam = 10,
    search: SearchParam = None,
    tag: TagParam = None,
) -> PaginatedResponse[BlogResponse]:
    result = await ListBlogsQuery.from_factory(factory).execute(
        page=page,
        limit=limit,
        search=search,
        tag=tag,
        include_drafts=True,
    )
    return PaginatedResponse[BlogResponse](
        data=[_to_response(dto) for dto in result.items],
        pagination=PaginationMeta.from_page(result),
    )


@router.get(
    "/{slug}",
    summary="Read a blog",
    responses={
        200: {"description": "The blog, with rendered HTML"},
        404: {"description": "Blog not found or not published"},
    },
)
async def get_blog(
    slug: str,
    factory: PublicRepoFactory,
    renderer: MarkdownRendererDep,
) -> DataResponse[BlogResponse]:
    """
    Get a blog by slug and count the view.

    Drafts are only returned when the request carries a valid token.
    """
    query = GetBlogBySlugQuery.from_factory(factory, markdown_renderer=renderer)
    try:
        blog = await query.execute(slug, include_drafts=factory.is_authenticated)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[BlogResponse](data=_to_response(blog))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog",
    responses={
        201: {"description": "Blog created"},
        400: {"description": "Invalid input"},
        401: {"description": "Not authenticated"},
        409: {"description": "A blog with the same slug exists"},
    },
)
async def create_blog(
    request: BlogCreateRequest,
    factory: RepoFactory,
) -> DataResponse[BlogResponse]:
    command = CreateBlogCommand.from_factory(factory)

    try:
        blog = await command.execute(
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            cover_image=request.cover_image,
            tags=request.tags,
            published=request.published,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[BlogResponse](
        message="Blog created successfully",
        data=_to_response(BlogDTO.from_entity(blog)),
    )


@router.put(
    "/{blog_id}",
    summary="Update a blog",
    responses={
        200: {"description": "Blog updated"},
        400: {"description": "Invalid input"},
        401: {"description": "Not authenticated"},
        404: {"description": "Blog not found"},
        409: {"description": "The new title's slug is taken"},
    },
)
async def update_blog(
    blog_id: UUID,
    request: BlogUpdateRequest,
    factory: RepoFactory,
) -> DataResponse[BlogResponse]:
    """Update the fields present in the body; absent fields are unchanged."""
    command = UpdateBlogCommand.from_factory(factory)

    try:
        blog = await command.execute(
            blog_id=blog_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[BlogResponse](
        message="Blog updated successfully",
        data=_to_response(BlogDTO.from_entity(blog)),
    )


@router.delete(
    "/{blog_id}",
    summary="Delete a blog",
    responses={
        200: {"description": "Blog deleted"},
        401: {"description": "Not authenticated"},
        404: {"description": "Blog not found"},
    },
)
async def delete_blog(blog_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = DeleteBlogCommand.from_factory(factory)

    try:
        await command.execute(blog_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Blog deleted successfully")


@router.post(
    "/{blog_id}/cover",
    summary="Upload a cover image",
    responses={
        200: {"description": "Cover image stored"},
        400: {"description": "Missing, empty, oversized or non-image file"},
        401: {"description": "Not authenticated"},
        404: {"description": "Blog not found"},
    },
)
async def upload_cover(
    blog_id: UUID,
    factory: RepoFactory,
    upload_service: UploadService,
    cover: Annotated[Optional[UploadFile], File(description="Image file")] = None,
) -> DataResponse[BlogResponse]:
    command = AttachBlogCoverCommand.from_factory(factory, upload_service)

    try:
        upload = await read_image_upload(cover, upload_service.max_bytes)
        blog = await command.execute(blog_id, upload)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse[BlogResponse](
        message="Cover image uploaded successfully",
        data=_to_response(BlogDTO.from_entity(blog)),
    )
