"""SQLAlchemy model for portfolio projects."""

from uuid import UUID

from sqlalchemy import JSON, Boolean, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from folio.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class ProjectModel(Base, TimestampMixin):
    """SQLAlchemy model for Project entities."""

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tech_stack: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    thumbnail: Mapped[str] = mapped_column(
        String(500),
        default="",
        nullable=False,
    )
    live_demo_url: Mapped[str] = mapped_column(
        String(500),
        default="",
        nullable=False,
    )
    github_url: Mapped[str] = mapped_column(
        String(500),
        default="",
        nullable=False,
    )
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    order: Mapped[int] = mapped_column("sort_order", Integer, default=0, nullable=False)

    __table_args__ = (
        Index("ix_projects_featured_created_at", "featured", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, title={self.title})>"
