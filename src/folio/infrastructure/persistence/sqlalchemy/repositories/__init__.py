from folio.infrastructure.persistence.sqlalchemy.repositories.content import (
    BlogRepositorySQLAlchemy,
    ProjectRepositorySQLAlchemy,
)
from folio.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "BlogRepositorySQLAlchemy",
    "ProjectRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
]
