"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from folio.domain.content.entities import Blog


class BlogRepository(ABC):
    """Repository interface for Blog entities."""

    @abstractmethod
    async def save(self, blog: Blog) -> None:
        """Insert or update a blog.

        Raises BlogSlugConflictError when the slug is already taken by
        another blog.
        """

    @abstractmethod
    async def find_by_id(self, blog_id: UUID) -> Optional[Blog]:
        """Find a blog by ID."""

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Blog]:
        """Find a blog by its slug."""

    @abstractmethod
    async def search(  # NOQA: PLR0913
        self,
        offset: int,
        limit: int,
        published_only: bool = True,
        terms: Sequence[str] = (),
        tag: Optional[str] = None,
    ) -> tuple[list[Blog], int]:
        """Return one page of blogs, newest first, plus the total match count.

        ``terms`` match case-insensitively against title, content, excerpt
        and tags; a blog matches if any term does. ``tag`` is an exact tag
        match.
        """

    @abstractmethod
    async def increment_views(self, blog_id: UUID) -> int:
        """Atomically add one view and return the new count."""

    @abstractmethod
    async def delete(self, blog_id: UUID) -> bool:
        """Delete a blog. Returns False if it did not exist."""
