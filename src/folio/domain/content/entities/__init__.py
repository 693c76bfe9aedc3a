from folio.domain.content.entities.blog import Blog
from folio.domain.content.entities.project import Project

__all__ = ["Blog", "Project"]
