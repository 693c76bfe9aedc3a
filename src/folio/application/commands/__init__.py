"""Write-side use cases."""

from folio.application.commands.content import (
    AttachBlogCoverCommand,
    AttachProjectThumbnailCommand,
    CreateBlogCommand,
    CreateProjectCommand,
    DeleteBlogCommand,
    DeleteProjectCommand,
    UpdateBlogCommand,
    UpdateProjectCommand,
)
from folio.application.commands.profile import (
    AttachAvatarCommand,
    UpdateProfileCommand,
)

__all__ = [
    "AttachAvatarCommand",
    "AttachBlogCoverCommand",
    "AttachProjectThumbnailCommand",
    "CreateBlogCommand",
    "CreateProjectCommand",
    "DeleteBlogCommand",
    "DeleteProjectCommand",
    "UpdateBlogCommand",
    "UpdateProfileCommand",
    "UpdateProjectCommand",
]
