"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    name: str
    description: str | None
    question_count: int
    created_at: datetime


class ListTagsRequest(BaseModel):
    """List tags request."""

    search: str | None = None
    limit: int = Field(default=100, ge=1, le=100)
    order_by: str = Field(default="name", pattern="^(name|popular)$")


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase(BaseUseCase[ListTagsRequest, ListTagsResponse]):
    """Use case for listing available tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Matching tags, alphabetical or most used first
        """
        with logfire.span(
            "list_tags.execute",
            search=request.search,
            limit=request.limit,
            order_by=request.order_by,
        ):
            tags = await self.tag_service.get_all_tags(
                search=request.search,
                order_by=request.order_by,
                limit=request.limit,
            )

            return ListTagsResponse(
                tags=[
                    TagItem(
                        name=tag.name.root,
                        description=tag.description,
                        question_count=tag.question_count,
                        created_at=tag.created_at,
                    )
                    for tag in tags
                ]
            )
