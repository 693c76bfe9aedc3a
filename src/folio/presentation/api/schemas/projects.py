"""Project schemas for API request/response models."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from folio.application.dtos import ProjectDTO
from folio.presentation.api.schemas.blogs import split_comma_list
from folio.presentation.api.schemas.common import ApiModel


class ProjectResponse(ApiModel):
    id: UUID
    title: str
    description: str
    tech_stack: list[str] = Field(default_factory=list)
    thumbnail: str = ""
    live_demo_url: str = ""
    github_url: str = ""
    featured: bool
    order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: ProjectDTO) -> "ProjectResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            tech_stack=dto.tech_stack,
            thumbnail=dto.thumbnail,
            live_demo_url=dto.live_demo_url,
            github_url=dto.github_url,
            featured=dto.featured,
            order=dto.order,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class ProjectCreateRequest(ApiModel):
    """Request schema for creating a project."""

    title: str
    description: str
    tech_stack: list[str] = Field(default_factory=list)
    thumbnail: str = ""
    live_demo_url: str = ""
    github_url: str = ""
    featured: bool = False
    order: int = 0

    @field_validator("tech_stack", mode="before")
    @classmethod
    def split_tech_stack(cls, value: Any) -> Any:
        return split_comma_list(value)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Folio",
                "description": "This portfolio's backend",
                "techStack": ["Python", "FastAPI"],
                "githubUrl": "https://github.com/example/folio",
                "featured": True,
                "order": 1,
            },
        },
    )


class ProjectUpdateRequest(ApiModel):
    """Request schema for updating a project. Omitted fields are unchanged."""

    title: Optional[str] = None
    description: Optional[str] = None
    tech_stack: Optional[list[str]] = None
    thumbnail: Optional[str] = None
    live_demo_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: Optional[bool] = None
    order: Optional[int] = None

    @field_validator("tech_stack", mode="before")
    @classmethod
    def split_tech_stack(cls, value: Any) -> Any:
        return split_comma_list(value)
