from folio.application.commands.content.attach_media_commands import (
    AttachBlogCoverCommand,
    AttachProjectThumbnailCommand,
)
from folio.application.commands.content.create_blog_command import CreateBlogCommand
from folio.application.commands.content.create_project_command import (
    CreateProjectCommand,
)
from folio.application.commands.content.delete_blog_command import DeleteBlogCommand
from folio.application.commands.content.delete_project_command import (
    DeleteProjectCommand,
)
from folio.application.commands.content.update_blog_command import UpdateBlogCommand
from folio.application.commands.content.update_project_command import (
    UpdateProjectCommand,
)

__all__ = [
    "AttachBlogCoverCommand",
    "AttachProjectThumbnailCommand",
    "CreateBlogCommand",
    "CreateProjectCommand",
    "DeleteBlogCommand",
    "DeleteProjectCommand",
    "UpdateBlogCommand",
    "UpdateProjectCommand",
]
