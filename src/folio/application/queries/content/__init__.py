from folio.application.queries.content.get_blog_by_slug_query import (
    GetBlogBySlugQuery,
)
from folio.application.queries.content.get_project_query import GetProjectQuery
from folio.application.queries.content.list_blogs_query import ListBlogsQuery
from folio.application.queries.content.list_projects_query import ListProjectsQuery

__all__ = [
    "GetBlogBySlugQuery",
    "GetProjectQuery",
    "ListBlogsQuery",
    "ListProjectsQuery",
]
