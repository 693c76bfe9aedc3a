"""FastAPI dependency injection for the Folio API.

Provides dependencies for:
- Database engine and sessions
- Authentication (current user from JWT)
- Repository factories (anonymous and authenticated)
- Rendering and upload services
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from folio.application.ports.media import ImageUpload
from folio.application.ports.rendering import MarkdownRenderer
from folio.application.services import ImageUploadService
from folio.infrastructure.persistence.sqlalchemy.models import Base
from folio.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from folio.infrastructure.rendering import PythonMarkdownRenderer
from folio.infrastructure.storage import LocalImageStorage
from folio.presentation.api.config import get_api_settings
from folio_config.settings import Settings
from folio_identity import (
    AuthenticationService,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    User,
    UserContext,
)
from folio_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Database Engine & Session
# -----------------------------------------------------------------------------


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.endswith("://"))


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async database engine for the configured URL.

    SQLite files get their parent directory created. In-memory SQLite uses a
    single shared connection so every session sees the same database.

    Returns
    -------
    AsyncEngine instance
    """
    url = settings.database_url

    if _is_in_memory_sqlite(url):
        return create_async_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if settings.database_type == "sqlite":
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the app's shared engine.

    Yields
    ------
    AsyncSession for database operations
    """
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


async def get_authentication_service(
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        registration_mode=settings.registration_mode,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Parameters
    ----------
    credentials
        Bearer token from Authorization header
    session
        Database session
    jwt_service
        JWT service for token verification

    Returns
    -------
    The authenticated User

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, token failed",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    if not payload.is_access_token():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, user not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User | None:
    """
    Optional authentication dependency.

    Returns the current user if a valid token is provided, None otherwise.
    Used by public endpoints that reveal drafts to the administrator.
    """
    if credentials is None:
        return None

    try:
        return await get_current_user(credentials, session, jwt_service)
    except HTTPException:
        return None


# -----------------------------------------------------------------------------
# User Context & Repository Factory
# -----------------------------------------------------------------------------


async def get_user_context(
    user: User = Depends(get_current_user),
) -> UserContext:
    return UserContext.create(user)


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for an authenticated request.

    Rejects the request with 401 before the handler runs when there is no
    valid token.
    """
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_public_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user: User | None = Depends(get_current_user_optional),
) -> SQLAlchemyRepositoryFactory:
    """Get repository factory for a public request (token optional)."""
    user_context = UserContext.create(user) if user is not None else None
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


PublicRepoFactory = Annotated[
    SQLAlchemyRepositoryFactory,
    Depends(get_public_repository_factory),
]


# -----------------------------------------------------------------------------
# Rendering & Uploads
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_markdown_renderer() -> MarkdownRenderer:
    return PythonMarkdownRenderer()


MarkdownRendererDep = Annotated[MarkdownRenderer, Depends(get_markdown_renderer)]


def get_image_upload_service(settings: SettingsDep) -> ImageUploadService:
    return ImageUploadService(
        storage=LocalImageStorage(settings.upload_dir),
        max_bytes=settings.upload_max_bytes,
        url_prefix=settings.upload_url_prefix,
    )


UploadService = Annotated[ImageUploadService, Depends(get_image_upload_service)]


async def read_image_upload(
    file: UploadFile | None,
    max_bytes: int,
) -> ImageUpload | None:
    """Read a multipart file into memory for the upload service.

    At most ``max_bytes + 1`` bytes are read: enough for the upload service
    to reject an oversized file without buffering all of it.
    """
    if file is None:
        return None
    data = await file.read(max_bytes + 1)
    return ImageUpload(
        filename=file.filename or "",
        data=data,
        content_type=file.content_type,
    )


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_blogs(factory: PublicRepoFactory, ...):
#       query = ListBlogsQuery.from_factory(factory)  # NOQA: ERA001
