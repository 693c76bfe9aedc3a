"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, static uploads and exception handlers.

All endpoints live under the /api prefix; uploaded images are served
from /uploads.
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from folio.domain.shared.time import utc_now
from folio.presentation.api.dependencies import (
    create_engine_from_settings,
    create_session_maker,
    create_tables,
)
from folio.presentation.api.exception_handlers import setup_exception_handlers
from folio.presentation.api.rate_limit import SlidingWindowRateLimiter
from folio.presentation.api.routers import (
    auth_router,
    blogs_router,
    profile_router,
    projects_router,
)
from folio.presentation.api.schemas import HealthResponse
from folio_config.settings import Settings, get_settings


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up logging for the folio packages with:
    - Console output with timestamps and module names
    - Configurable log level for folio modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("folio").setLevel(log_level)
    logging.getLogger("folio_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration and login for the portfolio owner.

- Register with name, email and password (no token is issued)
- Login to obtain a bearer token, valid for 7 days by default
- Both endpoints share a per-address rate limit
""",
    },
    {
        "name": "Blogs",
        "description": """Markdown blog posts.

Anonymous readers see published posts only. Reading a single post counts
a view and returns the body rendered to sanitized HTML.
""",
    },
    {
        "name": "Projects",
        "description": "Portfolio projects, ordered by `order` then newest.",
    },
    {
        "name": "Profile",
        "description": "The owner's public profile and avatar.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
        logger.info("Database backend: %s", settings.database_type)
        await _init_database_schema(app)
        yield

        # Shutdown - dispose the engine and its connection pool
        logger.info("Shutting down %s API...", settings.app_name)
        await app.state.engine.dispose()
        logger.info("Database connections closed")

    return lifespan


async def _init_database_schema(app: FastAPI) -> None:
    """Create missing tables and verify connectivity."""
    try:
        await create_tables(app.state.engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter()

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(blogs_router, prefix="/blogs", tags=["Blogs"])
    api_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
    api_router.include_router(profile_router, prefix="/profile", tags=["Profile"])

    @api_router.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Liveness probe."""
        return HealthResponse(message="Server is running", timestamp=utc_now())

    return api_router


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    # uploads are embedded by the front-end from another origin
    "Cross-Origin-Resource-Policy": "cross-origin",
}


async def _add_security_headers(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


async def _log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %d %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Personal portfolio backend: **blogs**, **projects** and a **profile**.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=_build_lifespan(settings),
        openapi_tags=OPENAPI_TAGS,
    )

    # One engine per application; requests get sessions from it
    app.state.settings = settings
    app.state.engine = create_engine_from_settings(settings)
    app.state.session_maker = create_session_maker(app.state.engine)
    app.state.auth_rate_limiter = SlidingWindowRateLimiter(
        max_attempts=settings.auth_rate_limit_attempts,
        window_seconds=settings.auth_rate_limit_window_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_add_security_headers)
    if settings.api_debug:
        app.middleware("http")(_log_requests)

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=settings.upload_dir),
        name="uploads",
    )

    return app
