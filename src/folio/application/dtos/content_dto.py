"""DTOs for blogs and projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from folio.domain.content.entities import Blog, Project
from folio_identity.domain.user import User


@dataclass(frozen=True)
class AuthorSummaryDTO:
    """The public bits of a blog author."""

    id: UUID
    name: str
    avatar: str
    bio: str

    @classmethod
    def from_user(cls, user: User) -> AuthorSummaryDTO:
        return cls(id=user.id, name=user.name, avatar=user.avatar, bio=user.bio)


@dataclass(frozen=True)
class BlogDTO:
    """A blog as returned to API clients.

    ``content`` is None in listings, ``content_html`` is only set on the
    detail view.
    """

    id: UUID
    title: str
    slug: str
    excerpt: str
    cover_image: str
    tags: list[str]
    published: bool
    views: int
    created_at: datetime
    updated_at: datetime
    author_id: Optional[UUID] = None
    author: Optional[AuthorSummaryDTO] = None
    content: Optional[str] = None
    content_html: Optional[str] = None

    @classmethod
    def from_entity(
        cls,
        blog: Blog,
        author: Optional[User] = None,
        include_content: bool = True,
        content_html: Optional[str] = None,
    ) -> BlogDTO:
        return cls(
            id=blog.id,
            title=blog.title,
            slug=blog.slug,
            excerpt=blog.excerpt,
            cover_image=blog.cover_image,
            tags=blog.tags,
            published=blog.published,
            views=blog.views,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
            author_id=blog.author_id,
            author=AuthorSummaryDTO.from_user(author) if author else None,
            content=blog.content if include_content else None,
            content_html=content_html,
        )


@dataclass(frozen=True)
class ProjectDTO:
    """A project as returned to API clients."""

    id: UUID
    title: str
    description: str
    thumbnail: str
    live_demo_url: str
    github_url: str
    featured: bool
    order: int
    created_at: datetime
    updated_at: datetime
    tech_stack: list[str] = field(default_factory=list)

    @classmethod
    def from_entity(cls, project: Project) -> ProjectDTO:
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            thumbnail=project.thumbnail,
            live_demo_url=project.live_demo_url,
            github_url=project.github_url,
            featured=project.featured,
            order=project.order,
            created_at=project.created_at,
            updated_at=project.updated_at,
            tech_stack=project.tech_stack,
        )
