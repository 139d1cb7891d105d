"""Pager wiring: one immutable Pager per app, exposed through FastAPI dependencies.

Usage:
  1. Call `register_pager(app)` (optionally with settings / name overrides)
  2. Inject `PagingParams` with `Depends(paging_params)` and run your query
  3. Inject the pager with `Depends(get_pager)` and return `pager.paged(request, ...)`

Rule: the pager never fetches, filters or sorts. `sort` / `dir` are yours to apply.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from pager.core.config import PagerSettings
from pager.core.exceptions import PagerConfigError, PagerNotRegisteredError
from pager.core.pagination import PagingParams, parse_paging
from pager.core.response import PageResult, build_envelope
from pager.core.sanitize import sanitize

logger = logging.getLogger(__name__)

# Characters RFC 3986 allows unescaped in a path segment, besides unreserved ones
_PATH_SAFE = "/:@!$&'()*+,;="


def _base_path(request: Request) -> str:
    """Request path without its query string, re-escaped for use in a link."""
    return quote(request.url.path, safe=_PATH_SAFE)


class Pager:
    """Stateless paging parser and envelope builder bound to one PagerSettings."""

    def __init__(self, settings: PagerSettings | None = None):
        self.settings = settings or PagerSettings()
        self._check_names()

    def _check_names(self) -> None:
        names = self.settings.param_names
        if not all(names):
            raise PagerConfigError("Pager query parameter names must not be empty")
        if len(set(names)) != len(names):
            raise PagerConfigError(f"Pager query parameter names must be distinct, got {names}")

    # ------------------------------------------------------------------
    # Request side
    # ------------------------------------------------------------------

    def params(self, request: Request) -> PagingParams:
        return parse_paging(request.query_params, self.settings)

    # ------------------------------------------------------------------
    # Response side
    # ------------------------------------------------------------------

    def envelope(
        self,
        request: Request,
        result: PageResult | Mapping[str, Any] | None = None,
        *,
        results: Sequence[Any] | None = None,
        total: int | None = None,
    ) -> dict:
        """Build the envelope for ``request``, re-reading page/size from its query string."""
        if result is None:
            result = PageResult(results=results if results is not None else [], total=total or 0)
        elif not isinstance(result, PageResult):
            result = PageResult(results=result["results"], total=result["total"])

        query = request.query_params
        page, size = sanitize(
            query.get(self.settings.page_param), query.get(self.settings.page_size_param)
        )
        return build_envelope(
            _base_path(request),
            page,
            size,
            result.results,
            result.total,
            page_param=self.settings.page_param,
            size_param=self.settings.page_size_param,
        )

    def paged(
        self,
        request: Request,
        result: PageResult | Mapping[str, Any] | None = None,
        *,
        results: Sequence[Any] | None = None,
        total: int | None = None,
    ) -> JSONResponse:
        """Return a 200 JSON response whose whole body is the paginated envelope."""
        envelope = self.envelope(request, result, results=results, total=total)
        return JSONResponse(status_code=200, content=jsonable_encoder(envelope))


# ---------------------------------------------------------------------------
# App wiring
# ---------------------------------------------------------------------------

def register_pager(app: FastAPI, settings: PagerSettings | None = None, **overrides: str) -> Pager:
    """Create the app-wide Pager and store it on ``app.state``.

    ``overrides`` are PagerSettings field names, e.g. ``page_size_param="per_page"``.
    """
    if overrides:
        base = settings.model_dump() if settings else {}
        settings = PagerSettings(**{**base, **overrides})
    pager = Pager(settings)
    app.state.pager = pager
    logger.info(
        "Pager registered (page=%s, size=%s, sort=%s, dir=%s)", *pager.settings.param_names
    )
    return pager


def get_pager(request: Request) -> Pager:
    """FastAPI dependency returning the Pager registered on the current app."""
    pager = getattr(request.app.state, "pager", None)
    if pager is None:
        raise PagerNotRegisteredError()
    return pager


def paging_params(request: Request, pager: Pager = Depends(get_pager)) -> PagingParams:
    """FastAPI dependency returning the sanitized PagingParams for the current request."""
    return pager.params(request)
