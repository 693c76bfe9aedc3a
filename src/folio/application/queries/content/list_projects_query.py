"""List projects query."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from folio.application.dtos import Page, PageRequest, ProjectDTO
from folio.domain.content.repositories import ProjectRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory


class ListProjectsQuery:
    """Query to list projects by display order, then newest first."""

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListProjectsQuery:
        return cls(project_repository=factory.project_repository())

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        featured: Optional[bool] = None,
    ) -> Page[ProjectDTO]:
        request = PageRequest(page=page, limit=limit)
        projects, total = await self._project_repo.find_page(
            offset=request.offset,
            limit=request.limit,
            featured=featured,
        )
        return Page(
            items=[ProjectDTO.from_entity(p) for p in projects],
            total=total,
            page=request.page,
            limit=request.limit,
        )

    async def featured(self) -> list[ProjectDTO]:
        projects = await self._project_repo.find_featured()
        return [ProjectDTO.from_entity(p) for p in projects]
