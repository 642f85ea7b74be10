"""List and count tags use cases."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from thanks.application.view import Presenter, TagView
from thanks.domain.repository import TagSortOrder
from thanks.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)
    name: Optional[str] = None  # Case-insensitive substring
    order_by: TagSortOrder = TagSortOrder.NAME


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagView]


class ListTagsUseCase:
    """Use case for browsing the tag vocabulary."""

    def __init__(
        self, tag_service: TagService, presenter: Presenter, max_page_size: int = 100
    ) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            presenter: View presenter
            max_page_size: Upper bound applied to the requested limit
        """
        self.tag_service = tag_service
        self.presenter = presenter
        self.max_page_size = max_page_size

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow."""
        limit = min(request.limit, self.max_page_size)
        with logfire.span(
            "list_tags.execute", limit=limit, offset=request.offset, name=request.name
        ):
            tags = await self.tag_service.list_tags(
                limit=limit,
                offset=request.offset,
                name=request.name,
                order_by=request.order_by,
            )
            return ListTagsResponse(tags=await self.presenter.tags(tags))


class CountTagsRequest(BaseModel):
    """Count tags request."""

    name: Optional[str] = None


class CountTagsUseCase:
    """Use case for counting tags."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: CountTagsRequest) -> int:
        return await self.tag_service.count(name=request.name)
