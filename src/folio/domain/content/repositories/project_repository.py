"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from folio.domain.content.entities import Project


class ProjectRepository(ABC):
    """Repository interface for Project entities.

    Listings are ordered by ``order`` ascending, then newest first.
    """

    @abstractmethod
    async def save(self, project: Project) -> None:
        """Insert or update a project."""

    @abstractmethod
    async def find_by_id(self, project_id: UUID) -> Optional[Project]:
        """Find a project by ID."""

    @abstractmethod
    async def find_page(
        self,
        offset: int,
        limit: int,
        featured: Optional[bool] = None,
    ) -> tuple[list[Project], int]:
        """Return one page of projects plus the total match count."""

    @abstractmethod
    async def find_featured(self) -> list[Project]:
        """Return every featured project."""

    @abstractmethod
    async def delete(self, project_id: UUID) -> bool:
        """Delete a project. Returns False if it did not exist."""
