"""Partially update a blog post."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional
from uuid import UUID

from folio.domain.content.entities import Blog
from folio.domain.content.exceptions import BlogNotFoundError, BlogSlugConflictError
from folio.domain.content.repositories import BlogRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateBlogCommand:
    """Merge the given fields into a blog.

    Fields left as None are not touched. Changing the title regenerates the
    slug, which must not collide with another blog.
    """

    def __init__(self, blog_repository: BlogRepository):
        self._blog_repo = blog_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateBlogCommand:
        return cls(blog_repository=factory.blog_repository())

    async def execute(  # NOQA: PLR0913
        self,
        blog_id: UUID,
        title: Optional[str] = None,
        content: Optional[str] = None,
        excerpt: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        published: Optional[bool] = None,
        cover_image: Optional[str] = None,
    ) -> Blog:
        blog = await self._blog_repo.find_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id=blog_id)

        previous_slug = blog.slug
        blog.update(
            title=title,
            content=content,
            excerpt=excerpt,
            tags=tags,
            published=published,
            cover_image=cover_image,
        )

        if blog.slug != previous_slug:
            await self._ensure_slug_free(blog)
            logger.info("Blog slug changed: %s -> %s", previous_slug, blog.slug)

        await self._blog_repo.save(blog)
        return blog

    async def _ensure_slug_free(self, blog: Blog) -> None:
        existing = await self._blog_repo.find_by_slug(blog.slug)
        if existing is not None and existing.id != blog.id:
            raise BlogSlugConflictError(blog.slug)
