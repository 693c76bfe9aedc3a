"""SQLAlchemy models for blog posts and their tags."""

from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.domain.content.slug import MAX_SLUG_LENGTH
from folio.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class BlogModel(Base, TimestampMixin):
    """SQLAlchemy model for Blog entities.

    ``author_id`` is a lookup reference to users.id without a foreign key:
    deleting a user never cascades into content.
    """

    __tablename__ = "blogs"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, default="", nullable=False)
    cover_image: Mapped[str] = mapped_column(
        String(500),
        default="",
        nullable=False,
    )
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    author_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True, index=True)

    tag_rows: Mapped[list["BlogTagModel"]] = relationship(
        back_populates="blog",
        cascade="all, delete-orphan",
        order_by="BlogTagModel.position",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_blogs_published_created_at", "published", "created_at"),
    )

    @property
    def tags(self) -> list[str]:
        return [row.tag for row in self.tag_rows]

    def __repr__(self) -> str:
        return f"<BlogModel(id={self.id}, slug={self.slug})>"


class BlogTagModel(Base):
    """One tag of a blog, kept in the order the author entered it."""

    __tablename__ = "blog_tags"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    blog_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    tag: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    blog: Mapped[BlogModel] = relationship(back_populates="tag_rows")
