"""Content domain: blog posts and portfolio projects."""

from folio.domain.content.entities import Blog, Project
from folio.domain.content.exceptions import (
    BlogNotFoundError,
    BlogSlugConflictError,
    ProfileNotFoundError,
    ProjectNotFoundError,
)
from folio.domain.content.repositories import BlogRepository, ProjectRepository
from folio.domain.content.slug import MAX_SLUG_LENGTH, slugify_title

__all__ = [
    "MAX_SLUG_LENGTH",
    "Blog",
    "BlogNotFoundError",
    "BlogRepository",
    "BlogSlugConflictError",
    "ProfileNotFoundError",
    "Project",
    "ProjectNotFoundError",
    "ProjectRepository",
    "slugify_title",
]
