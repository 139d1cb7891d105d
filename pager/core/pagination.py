"""Paging parameters parsed from list-endpoint query strings."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, computed_field

from pager.core.config import DEFAULT_SORT_DIR, DEFAULT_SORT_FIELD, PagerSettings
from pager.core.sanitize import sanitize


class PagingParams(BaseModel):
    """Sanitized `?page=1&size=15&sort=id&dir=asc`, with a zero-based `page`."""

    page: int = Field(default=0, ge=0, description="Page index (0-based)")
    size: int = Field(ge=1, description="Items per page")
    sort: str = Field(default=DEFAULT_SORT_FIELD, description="Sort field")
    dir: str = Field(default=DEFAULT_SORT_DIR, description="Sort direction, passed through verbatim")

    model_config = {"frozen": True}

    @computed_field
    @property
    def limit(self) -> int:
        return self.size

    @computed_field
    @property
    def offset(self) -> int:
        return self.page * self.size


class PageMeta(BaseModel):
    items: int
    page: int
    total: int
    pages: int
    first: str
    last: str
    prev: str | None = None
    next: str | None = None


def parse_paging(query: Mapping[str, Any] | None, settings: PagerSettings) -> PagingParams:
    """Build PagingParams from a query mapping; a missing mapping reads as empty."""
    query = query or {}
    page, size = sanitize(query.get(settings.page_param), query.get(settings.page_size_param))
    return PagingParams(
        page=page,
        size=size,
        sort=query.get(settings.sort_field_param) or DEFAULT_SORT_FIELD,
        dir=query.get(settings.sort_direction_param) or DEFAULT_SORT_DIR,
    )
