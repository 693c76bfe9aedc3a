"""Create a blog post authored by the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from folio.domain.content.entities import Blog
from folio.domain.content.exceptions import BlogSlugConflictError
from folio.domain.content.repositories import BlogRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory
    from folio_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class CreateBlogCommand:
    """Create a blog; the slug is derived from the title and must be free."""

    def __init__(
        self,
        blog_repository: BlogRepository,
        current_user: UserContext,
    ):
        self._blog_repo = blog_repository
        self._author_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateBlogCommand:
        return cls(
            blog_repository=factory.blog_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        title: str,
        content: str,
        excerpt: str = "",
        cover_image: str = "",
        tags: Optional[Iterable[str]] = None,
        published: bool = False,
    ) -> Blog:
        blog = Blog.create(
            title=title,
            content=content,
            author_id=self._author_id,
            excerpt=excerpt,
            cover_image=cover_image,
            tags=tags,
            published=published,
        )

        if await self._blog_repo.find_by_slug(blog.slug) is not None:
            raise BlogSlugConflictError(blog.slug)

        await self._blog_repo.save(blog)
        logger.info("Blog created: %s (published=%s)", blog.slug, blog.published)
        return blog
