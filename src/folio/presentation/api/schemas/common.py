"""Common schemas shared across API endpoints."""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from folio.application.dtos import Page

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(ApiModel):
    """Standard error response schema."""

    success: bool = False
    message: str = Field(..., description="Error message")
    code: Optional[str] = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Blog not found",
                "code": "BLOG_NOT_FOUND",
            },
        },
    )


class MessageResponse(ApiModel):
    """Success without a payload (e.g. deletes)."""

    success: bool = True
    message: str


class DataResponse(ApiModel, Generic[T]):
    """Success envelope around a single payload."""

    success: bool = True
    message: Optional[str] = None
    data: T


class PaginationMeta(ApiModel):
    total: int = Field(..., description="Total number of matching items")
    page: int = Field(..., description="Current page number (1-based)")
    pages: int = Field(..., description="Total number of pages")
    limit: int = Field(..., description="Items per page")

    @classmethod
    def from_page(cls, page: Page) -> "PaginationMeta":
        return cls(**page.to_pagination_dict())


class PaginatedResponse(ApiModel, Generic[T]):
    """Success envelope around one page of items."""

    success: bool = True
    data: list[T]
    pagination: PaginationMeta


class HealthResponse(ApiModel):
    """Health check response schema."""

    success: bool = True
    message: str = Field(..., description="Health status")
    timestamp: datetime
