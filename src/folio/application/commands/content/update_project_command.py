"""Partially update a project."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional
from uuid import UUID

from folio.domain.content.entities import Project
from folio.domain.content.exceptions import ProjectNotFoundError
from folio.domain.content.repositories import ProjectRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory


class UpdateProjectCommand:
    """Merge the given fields into a project; None leaves a field as is."""

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProjectCommand:
        return cls(project_repository=factory.project_repository())

    async def execute(  # NOQA: PLR0913
        self,
        project_id: UUID,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tech_stack: Optional[Iterable[str]] = None,
        live_demo_url: Optional[str] = None,
        github_url: Optional[str] = None,
        featured: Optional[bool] = None,
        order: Optional[int] = None,
        thumbnail: Optional[str] = None,
    ) -> Project:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)

        project.update(
            title=title,
            description=description,
            tech_stack=tech_stack,
            live_demo_url=live_demo_url,
            github_url=github_url,
            featured=featured,
            order=order,
            thumbnail=thumbnail,
        )
        await self._project_repo.save(project)
        return project
