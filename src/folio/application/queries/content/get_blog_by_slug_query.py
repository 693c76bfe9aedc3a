"""Get a single blog by slug and count the view."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from folio.application.dtos import BlogDTO
from folio.application.ports.rendering import MarkdownRenderer
from folio.domain.content.exceptions import BlogNotFoundError
from folio.domain.content.repositories import BlogRepository
from folio_identity.domain.user import UserRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class GetBlogBySlugQuery:
    """Fetch a blog for reading.

    Every successful call increments the view counter by one. Drafts are
    reported as missing unless ``include_drafts`` is set.
    """

    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
        markdown_renderer: MarkdownRenderer,
    ):
        self._blog_repo = blog_repository
        self._user_repo = user_repository
        self._renderer = markdown_renderer

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        markdown_renderer: MarkdownRenderer,
    ) -> GetBlogBySlugQuery:
        return cls(
            blog_repository=factory.blog_repository(),
            user_repository=factory.user_repository(),
            markdown_renderer=markdown_renderer,
        )

    async def execute(self, slug: str, include_drafts: bool = False) -> BlogDTO:
        blog = await self._blog_repo.find_by_slug(slug)
        if blog is None or not blog.is_visible_to(include_drafts):
            raise BlogNotFoundError(slug=slug)

        views = await self._blog_repo.increment_views(blog.id)
        logger.debug("Blog %s viewed (%d views)", blog.slug, views)

        author = None
        if blog.author_id is not None:
            author = await self._user_repo.find_by_id(blog.author_id)

        dto = BlogDTO.from_entity(
            blog,
            author=author,
            content_html=self._renderer.render(blog.content),
        )
        return replace(dto, views=views)
