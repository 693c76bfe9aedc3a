"""DTO for the owner profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from folio_identity.domain.user import User


@dataclass(frozen=True)
class ProfileDTO:
    """Public view of a user. Never carries credentials."""

    id: UUID
    name: str
    email: str
    title: str
    bio: str
    avatar: str
    role: str
    created_at: datetime
    updated_at: datetime
    social_links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_user(cls, user: User) -> ProfileDTO:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            title=user.title,
            bio=user.bio,
            avatar=user.avatar,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
            social_links=user.social_links,
        )
