"""Page-based pagination helpers.

Kept free of application settings so the client package can import the
listing schemas without loading server configuration.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_PAGE_SIZE = 100


class PaginationParams(BaseModel):
    """Page-based pagination (1-based page number, positive page size)."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    """Pagination envelope returned alongside a page of rows.

    Format: {page, limit, total, totalPages, hasMore}
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool

    @classmethod
    def build(cls, params: PaginationParams, total: int, returned: int) -> PaginationMeta:
        """Compute metadata for a page that returned ``returned`` rows out of ``total``."""
        return cls(
            page=params.page,
            limit=params.limit,
            total=total,
            total_pages=total_pages(total, params.limit),
            has_more=params.offset + returned < total,
        )


def total_pages(total: int, limit: int) -> int:
    """Ceiling of total / limit; 0 when there are no rows."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)
