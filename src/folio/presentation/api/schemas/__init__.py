"""Pydantic schemas for the HTTP API."""

from folio.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)
from folio.presentation.api.schemas.blogs import (
    AuthorResponse,
    BlogCreateRequest,
    BlogResponse,
    BlogUpdateRequest,
)
from folio.presentation.api.schemas.common import (
    ApiModel,
    DataResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)
from folio.presentation.api.schemas.profile import AvatarResponse, ProfileUpdateRequest
from folio.presentation.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)

__all__ = [
    "ApiModel",
    "AuthorResponse",
    "AvatarResponse",
    "BlogCreateRequest",
    "BlogResponse",
    "BlogUpdateRequest",
    "DataResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "ProfileUpdateRequest",
    "ProjectCreateRequest",
    "ProjectResponse",
    "ProjectUpdateRequest",
    "RegisterRequest",
    "UserResponse",
]
