"""Get tag use case."""

from pydantic import BaseModel

from thanks.application.view import Presenter, TagView
from thanks.domain.service import TagService
from thanks.domain.value import TagId


class GetTagRequest(BaseModel):
    """Get tag request."""

    tag_id: int


class GetTagUseCase:
    """Use case for viewing a tag."""

    def __init__(self, tag_service: TagService, presenter: Presenter) -> None:
        self.tag_service = tag_service
        self.presenter = presenter

    async def execute(self, request: GetTagRequest) -> TagView:
        """Execute get tag flow.

        Raises:
            NotFoundError: If the tag does not exist
        """
        tag = await self.tag_service.get_by_id(TagId(request.tag_id))
        [view] = await self.presenter.tags([tag])
        return view
