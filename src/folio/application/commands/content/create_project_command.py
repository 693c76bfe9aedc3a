"""Create a portfolio project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from folio.domain.content.entities import Project
from folio.domain.content.repositories import ProjectRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateProjectCommand:
    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateProjectCommand:
        return cls(project_repository=factory.project_repository())

    async def execute(  # NOQA: PLR0913
        self,
        title: str,
        description: str,
        tech_stack: Optional[Iterable[str]] = None,
        thumbnail: str = "",
        live_demo_url: str = "",
        github_url: str = "",
        featured: bool = False,
        order: int = 0,
    ) -> Project:
        project = Project.create(
            title=title,
            description=description,
            tech_stack=tech_stack,
            thumbnail=thumbnail,
            live_demo_url=live_demo_url,
            github_url=github_url,
            featured=featured,
            order=order,
        )
        await self._project_repo.save(project)
        logger.info("Project created: %s (%s)", project.title, project.id)
        return project
