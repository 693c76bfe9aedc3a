"""Profile schemas."""

from typing import Optional

from pydantic import Field

from folio.presentation.api.schemas.common import ApiModel


class ProfileUpdateRequest(ApiModel):
    """Partial profile update. Blank fields keep the stored value."""

    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    social_links: Optional[dict[str, str]] = Field(
        None,
        description="Merged into the stored links key by key",
    )


class AvatarResponse(ApiModel):
    avatar: str
