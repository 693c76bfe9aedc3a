"""SQLAlchemy implementation of BlogRepository."""

from __future__ import annotations

import logging
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, and_, exists, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.content.entities import Blog
from folio.domain.content.exceptions import BlogSlugConflictError
from folio.domain.content.repositories import BlogRepository
from folio.domain.shared.time import as_utc
from folio.infrastructure.persistence.sqlalchemy.models import BlogModel, BlogTagModel

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def _like_pattern(term: str) -> str:
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class BlogRepositorySQLAlchemy(BlogRepository):
    """SQLAlchemy implementation of the blog repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, blog: Blog) -> None:
        model = await self._find_model_by_id(blog.id)

        if model:
            logger.debug("Updating blog: %s", blog.slug)
            self._update_model(model, blog)
        else:
            logger.debug("Creating blog: %s", blog.slug)
            model = self._map_to_model(blog)
            self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as exc:
            msg = str(getattr(exc, "orig", exc)).lower()
            if "slug" in msg or "unique" in msg:
                raise BlogSlugConflictError(blog.slug) from exc
            raise

    async def find_by_id(self, blog_id: UUID) -> Optional[Blog]:
        model = await self._find_model_by_id(blog_id)
        return self._map_to_domain(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[Blog]:
        stmt = select(BlogModel).where(BlogModel.slug == slug.lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def search(  # NOQA: PLR0913
        self,
        offset: int,
        limit: int,
        published_only: bool = True,
        terms: Sequence[str] = (),
        tag: Optional[str] = None,
    ) -> tuple[list[Blog], int]:
        conditions = self._build_conditions(published_only, terms, tag)

        count_stmt = select(func.count()).select_from(BlogModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(BlogModel)
            .where(*conditions)
            .order_by(BlogModel.created_at.desc(), BlogModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        blogs = [self._map_to_domain(model) for model in result.scalars().all()]
        return blogs, total

    async def increment_views(self, blog_id: UUID) -> int:
        # Single UPDATE so concurrent readers never lose an increment.
        # updated_at is pinned so a read does not count as an edit.
        stmt = (
            update(BlogModel)
            .where(BlogModel.id == blog_id)
            .values(views=BlogModel.views + 1, updated_at=BlogModel.updated_at)
        )
        await self._session.execute(stmt)

        views_stmt = select(BlogModel.views).where(BlogModel.id == blog_id)
        return (await self._session.execute(views_stmt)).scalar_one()

    async def delete(self, blog_id: UUID) -> bool:
        model = await self._find_model_by_id(blog_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted blog: %s", model.slug)
        return True

    def _build_conditions(
        self,
        published_only: bool,
        terms: Sequence[str],
        tag: Optional[str],
    ) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []

        if published_only:
            conditions.append(BlogModel.published.is_(True))

        if tag:
            conditions.append(
                exists().where(
                    and_(BlogTagModel.blog_id == BlogModel.id, BlogTagModel.tag == tag),
                ),
            )

        term_clauses = []
        for term in terms:
            pattern = _like_pattern(term)
            term_clauses.append(
                or_(
                    BlogModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    BlogModel.content.ilike(pattern, escape=LIKE_ESCAPE),
                    BlogModel.excerpt.ilike(pattern, escape=LIKE_ESCAPE),
                    exists().where(
                        and_(
                            BlogTagModel.blog_id == BlogModel.id,
                            BlogTagModel.tag.ilike(pattern, escape=LIKE_ESCAPE),
                        ),
                    ),
                ),
            )
        if term_clauses:
            conditions.append(or_(*term_clauses))

        return conditions

    async def _find_model_by_id(self, blog_id: UUID) -> Optional[BlogModel]:
        stmt = select(BlogModel).where(BlogModel.id == blog_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: BlogModel) -> Blog:
        return Blog.reconstitute(
            id=model.id,
            title=model.title,
            slug=model.slug,
            content=model.content,
            excerpt=model.excerpt,
            cover_image=model.cover_image,
            tags=model.tags,
            published=model.published,
            views=model.views,
            author_id=model.author_id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, blog: Blog) -> BlogModel:
        model = BlogModel(
            id=blog.id,
            title=blog.title,
            slug=blog.slug,
            content=blog.content,
            excerpt=blog.excerpt,
            cover_image=blog.cover_image,
            published=blog.published,
            views=blog.views,
            author_id=blog.author_id,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )
        model.tag_rows = self._tag_rows(blog)
        return model

    def _update_model(self, model: BlogModel, blog: Blog) -> None:
        model.title = blog.title
        model.slug = blog.slug
        model.content = blog.content
        model.excerpt = blog.excerpt
        model.cover_image = blog.cover_image
        model.published = blog.published
        model.author_id = blog.author_id
        model.updated_at = blog.updated_at
        # views are only changed through increment_views
        if model.tags != blog.tags:
            model.tag_rows = self._tag_rows(blog)

    @staticmethod
    def _tag_rows(blog: Blog) -> list[BlogTagModel]:
        return [
            BlogTagModel(position=index, tag=tag)
            for index, tag in enumerate(blog.tags)
        ]
