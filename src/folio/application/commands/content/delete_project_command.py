"""Delete a project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from folio.domain.content.exceptions import ProjectNotFoundError
from folio.domain.content.repositories import ProjectRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteProjectCommand:
    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteProjectCommand:
        return cls(project_repository=factory.project_repository())

    async def execute(self, project_id: UUID) -> None:
        if not await self._project_repo.delete(project_id):
            raise ProjectNotFoundError(project_id)
        logger.info("Project deleted: %s", project_id)
