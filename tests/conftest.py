"""
Shared fixtures for the pager tests.

Each test gets a throwaway FastAPI app with the pager registered and a
`/users` route backed by an in-memory list.
"""

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from pager.core.pagination import PagingParams
from pager.plugin import Pager, get_pager, paging_params, register_pager

USERS: list[dict[str, Any]] = [
    {"id": 1, "username": "frank.zappa"},
    {"id": 2, "username": "warren.cuccurullo"},
    {"id": 3, "username": "nacho.libre"},
    {"id": 4, "username": "lou.ferrigno"},
    {"id": 5, "username": "bud.spencer"},
    {"id": 6, "username": "terence.hill"},
    {"id": 7, "username": "frank.zappa"},
    {"id": 8, "username": "warren.cuccurullo"},
    {"id": 9, "username": "nacho.libre"},
    {"id": 10, "username": "lou.ferrigno"},
    {"id": 11, "username": "bud.spencer"},
    {"id": 12, "username": "terence.hill"},
]


@pytest.fixture
def users() -> list[dict[str, Any]]:
    return list(USERS)


@pytest.fixture
def build_app(users: list[dict[str, Any]]) -> Callable[..., FastAPI]:
    """Factory for an app with the pager registered (name overrides pass through)."""

    def _build(**overrides: str) -> FastAPI:
        app = FastAPI()
        register_pager(app, **overrides)

        @app.get("/users")
        def list_users(
            request: Request,
            paging: PagingParams = Depends(paging_params),
            pager: Pager = Depends(get_pager),
        ):
            page = users[paging.offset:paging.offset + paging.limit]
            return pager.paged(request, {"results": page, "total": len(users)})

        @app.get("/users/params")
        def show_params(paging: PagingParams = Depends(paging_params)):
            return paging.model_dump()

        return app

    return _build


@pytest.fixture
def client(build_app: Callable[..., FastAPI]) -> Generator[TestClient, None, None]:
    with TestClient(build_app()) as test_client:
        yield test_client


class FakeRequest:
    """Just enough of a Starlette Request for Pager.params / Pager.envelope."""

    class _URL:
        def __init__(self, path: str):
            self.path = path

    def __init__(self, path: str = "/users", query: dict[str, str] | None = None):
        self.url = self._URL(path)
        self.query_params = query or {}


@pytest.fixture
def make_request() -> Callable[..., FakeRequest]:
    return FakeRequest
