"""Application factories for repository access."""

from folio.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
