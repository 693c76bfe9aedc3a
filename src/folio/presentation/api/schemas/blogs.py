"""Blog schemas for API request/response models."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from folio.application.dtos import AuthorSummaryDTO, BlogDTO
from folio.presentation.api.schemas.common import ApiModel


def split_comma_list(value: Any) -> Any:
    """Accept "a, b" as well as ["a", "b"] for list fields."""
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class AuthorResponse(ApiModel):
    id: UUID
    name: str
    avatar: str = ""
    bio: str = ""

    @classmethod
    def from_dto(cls, dto: AuthorSummaryDTO) -> "AuthorResponse":
        return cls(id=dto.id, name=dto.name, avatar=dto.avatar, bio=dto.bio)


class BlogResponse(ApiModel):
    """A blog post. ``content`` is absent from public listings."""

    id: UUID
    title: str
    slug: str
    content: Optional[str] = None
    content_html: Optional[str] = None
    excerpt: str = ""
    cover_image: str = ""
    tags: list[str] = Field(default_factory=list)
    published: bool
    views: int
    author_id: Optional[UUID] = None
    author: Optional[AuthorResponse] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: BlogDTO) -> "BlogResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            slug=dto.slug,
            content=dto.content,
            content_html=dto.content_html,
            excerpt=dto.excerpt,
            cover_image=dto.cover_image,
            tags=dto.tags,
            published=dto.published,
            views=dto.views,
            author_id=dto.author_id,
            author=AuthorResponse.from_dto(dto.author) if dto.author else None,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class BlogCreateRequest(ApiModel):
    """Request schema for creating a blog."""

    title: str = Field(..., description="Title; the slug is derived from it")
    content: str = Field(..., description="Markdown body")
    excerpt: str = ""
    cover_image: str = ""
    tags: list[str] = Field(default_factory=list)
    published: bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> Any:
        return split_comma_list(value)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hello World",
                "content": "# Hello\n\nFirst post.",
                "excerpt": "First post",
                "tags": ["intro", "python"],
                "published": True,
            },
        },
    )


class BlogUpdateRequest(ApiModel):
    """Request schema for updating a blog. Omitted fields are unchanged."""

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    tags: Optional[list[str]] = None
    published: Optional[bool] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> Any:
        return split_comma_list(value)
