"""List and count thank yous use cases."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from thanks.application.view import Presenter, ThankYouView
from thanks.domain.service import ThankYouService
from thanks.domain.value import SecurityContext, UserId


class ListThankYousRequest(BaseModel):
    """List thank yous request."""

    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)
    include_thanked: bool = False
    recipient_id: Optional[int] = None
    viewer: Optional[SecurityContext] = None


class ListThankYousResponse(BaseModel):
    """List thank yous response."""

    thank_yous: list[ThankYouView]


class ListThankYousUseCase:
    """Use case for browsing recent thank yous."""

    def __init__(
        self,
        thank_you_service: ThankYouService,
        presenter: Presenter,
        max_page_size: int = 100,
    ) -> None:
        """Initialize list thank yous use case.

        Args:
            thank_you_service: Thank-you domain service
            presenter: View presenter
            max_page_size: Upper bound applied to the requested limit
        """
        self.thank_you_service = thank_you_service
        self.presenter = presenter
        self.max_page_size = max_page_size

    async def execute(self, request: ListThankYousRequest) -> ListThankYousResponse:
        """Execute list thank yous flow, newest first."""
        limit = min(request.limit, self.max_page_size)
        recipient_id = (
            UserId(request.recipient_id) if request.recipient_id is not None else None
        )

        with logfire.span(
            "list_thank_yous.execute",
            limit=limit,
            offset=request.offset,
            recipient_id=recipient_id,
        ):
            thank_yous = await self.thank_you_service.list_recent(
                limit=limit,
                offset=request.offset,
                recipient_id=recipient_id,
                refresh_thanked=request.include_thanked,
            )
            views = await self.presenter.thank_yous(
                thank_yous, request.viewer, include_thanked=request.include_thanked
            )
            return ListThankYousResponse(thank_yous=views)


class CountThankYousRequest(BaseModel):
    """Count thank yous request."""

    recipient_id: Optional[int] = None


class CountThankYousUseCase:
    """Use case for counting thank yous."""

    def __init__(self, thank_you_service: ThankYouService) -> None:
        self.thank_you_service = thank_you_service

    async def execute(self, request: CountThankYousRequest) -> int:
        recipient_id = (
            UserId(request.recipient_id) if request.recipient_id is not None else None
        )
        return await self.thank_you_service.count(recipient_id=recipient_id)
