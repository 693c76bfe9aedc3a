"""Get a single project."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from folio.application.dtos import ProjectDTO
from folio.domain.content.exceptions import ProjectNotFoundError
from folio.domain.content.repositories import ProjectRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory


class GetProjectQuery:
    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProjectQuery:
        return cls(project_repository=factory.project_repository())

    async def execute(self, project_id: UUID) -> ProjectDTO:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return ProjectDTO.from_entity(project)
