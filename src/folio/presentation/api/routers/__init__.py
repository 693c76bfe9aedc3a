"""API routers."""

from folio.presentation.api.routers.auth import router as auth_router
from folio.presentation.api.routers.blogs import router as blogs_router
from folio.presentation.api.routers.profile import router as profile_router
from folio.presentation.api.routers.projects import router as projects_router

__all__ = [
    "auth_router",
    "blogs_router",
    "profile_router",
    "projects_router",
]
