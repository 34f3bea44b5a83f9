"""Tag routes."""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from qna.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    search: str | None = Query(default=None, max_length=50),
    limit: int = Query(default=100, ge=1, le=100),
    order_by: Literal["name", "popular"] = Query(default="name"),
) -> ListTagsResponse:
    """List tags.

    Examples:
        GET /tags?order_by=popular&limit=10
        GET /tags?search=py
    """
    return await list_tags_use_case.execute(
        ListTagsRequest(search=search, limit=limit, order_by=order_by)
    )
