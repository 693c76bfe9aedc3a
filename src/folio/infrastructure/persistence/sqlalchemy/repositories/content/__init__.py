from folio.infrastructure.persistence.sqlalchemy.repositories.content.blog_repository import (  # NOQA: E501
    BlogRepositorySQLAlchemy,
)
from folio.infrastructure.persistence.sqlalchemy.repositories.content.project_repository import (  # NOQA: E501
    ProjectRepositorySQLAlchemy,
)

__all__ = ["BlogRepositorySQLAlchemy", "ProjectRepositorySQLAlchemy"]
