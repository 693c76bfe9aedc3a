"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from folio.infrastructure.persistence.sqlalchemy.repositories.content import (
    BlogRepositorySQLAlchemy,
    ProjectRepositorySQLAlchemy,
)
from folio_identity.exceptions import AuthError
from folio_identity.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy

if TYPE_CHECKING:
    from folio_identity.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    One factory lives for one request and shares its session between all
    repositories, so a command's writes commit or roll back together.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_context: Optional[UserContext] = None,
    ):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._blog_repo: BlogRepositorySQLAlchemy | None = None
        self._project_repo: ProjectRepositorySQLAlchemy | None = None
        self._user_repo: UserRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> UserContext:
        if self._user_context is None:
            msg = "Not authorized, no token"
            raise AuthError(msg)
        return self._user_context

    @property
    def is_authenticated(self) -> bool:
        return self._user_context is not None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def blog_repository(self) -> BlogRepositorySQLAlchemy:
        if self._blog_repo is None:
            self._blog_repo = BlogRepositorySQLAlchemy(self._session)
        return self._blog_repo

    def project_repository(self) -> ProjectRepositorySQLAlchemy:
        if self._project_repo is None:
            self._project_repo = ProjectRepositorySQLAlchemy(self._session)
        return self._project_repo

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo
