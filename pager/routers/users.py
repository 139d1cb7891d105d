"""User list router — REFERENCE pattern for paginated list endpoints.

Pattern:
  1. Inject PagingParams via Depends(paging_params)
  2. Apply sort / dir / offset / limit to your own query
  3. Return pager.paged(request, results=..., total=...)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from pager.core.pagination import PagingParams
from pager.core.response import PagedResponse
from pager.plugin import Pager, get_pager, paging_params
from pager.schemas.common import UserOut

router = APIRouter(prefix="/users", tags=["Users"])

USERS: list[UserOut] = [
    UserOut(id=i, username=name)
    for i, name in enumerate(
        [
            "frank.zappa",
            "warren.cuccurullo",
            "nacho.libre",
            "lou.ferrigno",
            "bud.spencer",
            "terence.hill",
            "frank.zappa",
            "warren.cuccurullo",
            "nacho.libre",
            "lou.ferrigno",
            "bud.spencer",
            "terence.hill",
        ],
        start=1,
    )
]


def _sorted_users(sort: str, direction: str) -> list[UserOut]:
    # Unknown sort fields fall back to id
    field = sort if sort in UserOut.model_fields else "id"
    return sorted(USERS, key=lambda u: getattr(u, field), reverse=direction.lower() == "desc")


@router.get("", response_model=PagedResponse[UserOut])
async def list_users(
    request: Request,
    paging: PagingParams = Depends(paging_params),
    pager: Pager = Depends(get_pager),
):
    """List users (paginated). Sort with ?sort=id|username&dir=asc|desc."""
    users = _sorted_users(paging.sort, paging.dir)
    page = users[paging.offset:paging.offset + paging.limit]
    return pager.paged(request, results=page, total=len(users))
