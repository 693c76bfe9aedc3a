"""Content domain exceptions."""

from uuid import UUID

from folio.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class BlogNotFoundError(EntityNotFoundError):
    """Raised when a blog cannot be found (or is hidden from the caller)."""

    def __init__(
        self,
        blog_id: UUID | str | None = None,
        slug: str | None = None,
    ) -> None:
        super().__init__(
            message="Blog not found",
            code=ErrorCode.BLOG_NOT_FOUND,
            details={
                "blog_id": str(blog_id) if blog_id else None,
                "slug": slug,
            },
        )


class ProjectNotFoundError(EntityNotFoundError):
    """Raised when a project cannot be found."""

    def __init__(self, project_id: UUID | str) -> None:
        super().__init__(
            message="Project not found",
            code=ErrorCode.PROJECT_NOT_FOUND,
            details={"project_id": str(project_id)},
        )


class ProfileNotFoundError(EntityNotFoundError):
    """Raised when no owner profile exists yet."""

    def __init__(self) -> None:
        super().__init__(
            message="Profile not found",
            code=ErrorCode.PROFILE_NOT_FOUND,
        )


class BlogSlugConflictError(ConflictError):
    """Raised when a blog title produces a slug that is already taken."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(
            message=f"A blog with the slug '{slug}' already exists",
            code=ErrorCode.DUPLICATE_SLUG,
            details={"slug": slug},
        )
