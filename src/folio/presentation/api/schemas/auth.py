"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from folio.application.dtos import ProfileDTO
from folio.presentation.api.schemas.common import ApiModel


class RegisterRequest(ApiModel):
    """Request schema for account registration.

    Password strength is checked by the auth service so the error message
    is the same for every client.
    """

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password (6-128 characters)")
    confirm_password: Optional[str] = Field(
        None,
        description="Optional confirmation; must equal password when given",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "secret1",
            },
        },
    )


class LoginRequest(ApiModel):
    """Request schema for login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "ada@example.com", "password": "secret1"},
        },
    )


class UserResponse(ApiModel):
    """Public user data. Never contains the password hash."""

    id: UUID
    name: str
    email: str
    title: str = ""
    bio: str = ""
    avatar: str = ""
    social_links: dict[str, str] = Field(default_factory=dict)
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: ProfileDTO) -> "UserResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            title=dto.title,
            bio=dto.bio,
            avatar=dto.avatar,
            social_links=dto.social_links,
            role=dto.role,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class LoginResponse(ApiModel):
    """Successful login: the bearer token plus the user."""

    success: bool = True
    message: str = "Login successful"
    token: str = Field(..., description="Bearer token for the Authorization header")
    data: UserResponse
