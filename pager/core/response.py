"""Paginated JSON response envelope helpers."""


from collections.abc import Sequence
from typing import Any, Generic, NamedTuple, TypeVar

from pydantic import BaseModel

from pager.core.pagination import PageMeta

T = TypeVar("T")


class PageResult(NamedTuple):
    """What a list handler hands back: the fetched page and the full collection count."""

    results: Sequence[Any]
    total: int


class PagedResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ page: {...}, results: [...] }`"""

    page: PageMeta
    results: list[T]


def page_link(base_path: str, page_param: str, size_param: str, page: int, size: int) -> str:
    return f"{base_path}?{page_param}={page}&{size_param}={size}"


def build_envelope(
    base_path: str,
    page: int,
    size: int,
    results: Sequence[Any],
    total: int,
    page_param: str = "page",
    size_param: str = "size",
) -> dict:
    """Build the envelope dict for zero-based ``page`` of ``size`` items out of ``total``.

    `prev` is present only when there is a page before the current one and
    `next` only when ``page + 2`` is still below the page count.
    """
    pages = -(-total // size)
    prev_page = page
    next_page = page + 2

    # Plain dict: total is passed through as given, never validated
    meta = {
        "items": size,
        "page": page + 1,
        "total": total,
        "pages": pages,
        "first": page_link(base_path, page_param, size_param, 1, size),
        "last": page_link(base_path, page_param, size_param, pages, size),
    }
    if prev_page >= 1:
        meta["prev"] = page_link(base_path, page_param, size_param, prev_page, size)
    if next_page < pages:
        meta["next"] = page_link(base_path, page_param, size_param, next_page, size)

    return {
        "page": meta,
        "results": results,
    }
