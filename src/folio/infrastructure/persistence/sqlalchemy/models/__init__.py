from folio.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from folio.infrastructure.persistence.sqlalchemy.models.blog_model import (
    BlogModel,
    BlogTagModel,
)
from folio.infrastructure.persistence.sqlalchemy.models.project_model import (
    ProjectModel,
)

__all__ = [
    "Base",
    "BlogModel",
    "BlogTagModel",
    "ProjectModel",
    "TimestampMixin",
]
