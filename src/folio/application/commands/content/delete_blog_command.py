"""Delete a blog post."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from folio.domain.content.exceptions import BlogNotFoundError
from folio.domain.content.repositories import BlogRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteBlogCommand:
    """Hard-delete a blog. Its uploaded cover stays on disk."""

    def __init__(self, blog_repository: BlogRepository):
        self._blog_repo = blog_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteBlogCommand:
        return cls(blog_repository=factory.blog_repository())

    async def execute(self, blog_id: UUID) -> None:
        deleted = await self._blog_repo.delete(blog_id)
        if not deleted:
            raise BlogNotFoundError(blog_id=blog_id)
        logger.info("Blog deleted: %s", blog_id)
