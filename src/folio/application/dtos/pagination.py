"""Pagination request and result types shared by list queries."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from folio.domain.shared.exceptions import ValidationError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """A validated (page, limit) pair. Pages are 1-based."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            msg = "Page must be 1 or greater"
            raise ValidationError(msg, details={"field": "page", "value": self.page})
        if not 1 <= self.limit <= MAX_LIMIT:
            msg = f"Limit must be between 1 and {MAX_LIMIT}"
            raise ValidationError(msg, details={"field": "limit", "value": self.limit})

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the numbers a client needs to navigate."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def pages(self) -> int:
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.limit)

    def to_pagination_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "page": self.page,
            "pages": self.pages,
            "limit": self.limit,
        }
