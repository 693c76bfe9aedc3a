"""SQLAlchemy implementation of ProjectRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.content.entities import Project
from folio.domain.content.repositories import ProjectRepository
from folio.domain.shared.time import as_utc
from folio.infrastructure.persistence.sqlalchemy.models import ProjectModel

logger = logging.getLogger(__name__)

_ORDERING = (
    ProjectModel.order.asc(),
    ProjectModel.created_at.desc(),
    ProjectModel.id.desc(),
)


class ProjectRepositorySQLAlchemy(ProjectRepository):
    """SQLAlchemy implementation of the project repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, project: Project) -> None:
        model = await self._find_model_by_id(project.id)

        if model:
            logger.debug("Updating project: %s", project.id)
            self._update_model(model, project)
        else:
            logger.debug("Creating project: %s", project.id)
            self._session.add(self._map_to_model(project))

        await self._session.flush()

    async def find_by_id(self, project_id: UUID) -> Optional[Project]:
        model = await self._find_model_by_id(project_id)
        return self._map_to_domain(model) if model else None

    async def find_page(
        self,
        offset: int,
        limit: int,
        featured: Optional[bool] = None,
    ) -> tuple[list[Project], int]:
        conditions = []
        if featured is not None:
            conditions.append(ProjectModel.featured.is_(featured))

        count_stmt = select(func.count()).select_from(ProjectModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(ProjectModel)
            .where(*conditions)
            .order_by(*_ORDERING)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()], total

    async def find_featured(self) -> list[Project]:
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.featured.is_(True))
            .order_by(*_ORDERING)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete(self, project_id: UUID) -> bool:
        model = await self._find_model_by_id(project_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted project: %s", project_id)
        return True

    async def _find_model_by_id(self, project_id: UUID) -> Optional[ProjectModel]:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ProjectModel) -> Project:
        return Project.reconstitute(
            id=model.id,
            title=model.title,
            description=model.description,
            tech_stack=list(model.tech_stack or []),
            thumbnail=model.thumbnail,
            live_demo_url=model.live_demo_url,
            github_url=model.github_url,
            featured=model.featured,
            order=model.order,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, project: Project) -> ProjectModel:
        return ProjectModel(
            id=project.id,
            title=project.title,
            description=project.description,
            tech_stack=project.tech_stack,
            thumbnail=project.thumbnail,
            live_demo_url=project.live_demo_url,
            github_url=project.github_url,
            featured=project.featured,
            order=project.order,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def _update_model(self, model: ProjectModel, project: Project) -> None:
        model.title = project.title
        model.description = project.description
        model.tech_stack = project.tech_stack
        model.thumbnail = project.thumbnail
        model.live_demo_url = project.live_demo_url
        model.github_url = project.github_url
        model.featured = project.featured
        model.order = project.order
        model.updated_at = project.updated_at
