"""Query-string pagination and paginated response envelopes for FastAPI."""

from pager.core.config import PagerSettings
from pager.core.pagination import PageMeta, PagingParams
from pager.core.response import PagedResponse, PageResult, build_envelope
from pager.core.sanitize import sanitize
from pager.plugin import Pager, get_pager, paging_params, register_pager

__all__ = [
    "PageMeta",
    "PageResult",
    "PagedResponse",
    "Pager",
    "PagerSettings",
    "PagingParams",
    "build_envelope",
    "get_pager",
    "paging_params",
    "register_pager",
    "sanitize",
]
