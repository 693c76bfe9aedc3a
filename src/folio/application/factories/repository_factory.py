"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from folio.domain.content.repositories import BlogRepository, ProjectRepository
from folio_identity.domain.user.repositories import UserRepository

if TYPE_CHECKING:
    from folio_identity.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def current_user(self) -> UserContext:
        """Get the authenticated user.

        Raises AuthError when the request is anonymous.
        """
        ...

    @property
    def is_authenticated(self) -> bool:
        """Whether the request carries a verified user."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def blog_repository(self) -> BlogRepository:
        """Get blog repository."""
        ...

    def project_repository(self) -> ProjectRepository:
        """Get project repository."""
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...
