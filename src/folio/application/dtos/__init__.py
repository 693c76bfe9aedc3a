"""Data transfer objects returned by queries and commands."""

from folio.application.dtos.content_dto import (
    AuthorSummaryDTO,
    BlogDTO,
    ProjectDTO,
)
from folio.application.dtos.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    Page,
    PageRequest,
)
from folio.application.dtos.profile_dto import ProfileDTO

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "AuthorSummaryDTO",
    "BlogDTO",
    "Page",
    "PageRequest",
    "ProfileDTO",
    "ProjectDTO",
]
