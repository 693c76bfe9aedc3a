from folio.domain.content.repositories.blog_repository import BlogRepository
from folio.domain.content.repositories.project_repository import ProjectRepository

__all__ = ["BlogRepository", "ProjectRepository"]
