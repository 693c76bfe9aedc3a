"""Read-side use cases."""

from folio.application.queries.content import (
    GetBlogBySlugQuery,
    GetProjectQuery,
    ListBlogsQuery,
    ListProjectsQuery,
)
from folio.application.queries.profile import GetProfileQuery

__all__ = [
    "GetBlogBySlugQuery",
    "GetProfileQuery",
    "GetProjectQuery",
    "ListBlogsQuery",
    "ListProjectsQuery",
]
