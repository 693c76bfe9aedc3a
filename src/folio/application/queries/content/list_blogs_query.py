"""List blogs query - paginated blog listing with search and tag filter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from folio.application.dtos import BlogDTO, Page, PageRequest
from folio.domain.content.repositories import BlogRepository
from folio_identity.domain.user import UserRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory


class ListBlogsQuery:
    """Query to list blogs, newest first."""

    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
    ):
        self._blog_repo = blog_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListBlogsQuery:
        return cls(
            blog_repository=factory.blog_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        include_drafts: bool = False,
    ) -> Page[BlogDTO]:
        """
        Return one page of blogs.

        Parameters
        ----------
        page
            1-based page number
        limit
            Page size, 1 to 100
        search
            Whitespace-separated terms; a blog matches if any term occurs in
            its title, content, excerpt or tags (case-insensitive)
        tag
            Exact tag to filter on
        include_drafts
            Include unpublished blogs. Only the admin listing sets this, and
            only the admin listing receives the full markdown content.
        """
        request = PageRequest(page=page, limit=limit)
        terms = tuple(search.split()) if search else ()
        tag = tag.strip() if tag else None

        blogs, total = await self._blog_repo.search(
            offset=request.offset,
            limit=request.limit,
            published_only=not include_drafts,
            terms=terms,
            tag=tag or None,
        )

        authors = await self._user_repo.find_by_ids(
            blog.author_id for blog in blogs if blog.author_id is not None
        )
        items = [
            BlogDTO.from_entity(
                blog,
                author=authors.get(blog.author_id) if blog.author_id else None,
                include_content=include_drafts,
            )
            for blog in blogs
        ]
        return Page(items=items, total=total, page=request.page, limit=request.limit)
