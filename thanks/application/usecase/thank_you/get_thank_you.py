"""Get thank you use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from thanks.application.view import Presenter, ThankYouView
from thanks.domain.service import ThankYouService
from thanks.domain.value import SecurityContext, ThankYouId


class GetThankYouRequest(BaseModel):
    """Get thank you request."""

    thank_you_id: int
    viewer: Optional[SecurityContext] = None


class GetThankYouUseCase:
    """Use case for viewing a single thank you."""

    def __init__(
        self, thank_you_service: ThankYouService, presenter: Presenter
    ) -> None:
        """Initialize get thank you use case.

        Args:
            thank_you_service: Thank-you domain service
            presenter: View presenter
        """
        self.thank_you_service = thank_you_service
        self.presenter = presenter

    async def execute(self, request: GetThankYouRequest) -> ThankYouView:
        """Execute get thank you flow.

        Thanked entities are refreshed from the directory.

        Raises:
            NotFoundError: If the thank you does not exist
        """
        thank_you_id = ThankYouId(request.thank_you_id)
        with logfire.span("get_thank_you.execute", thank_you_id=thank_you_id):
            thank_you = await self.thank_you_service.get(thank_you_id)
            [view] = await self.presenter.thank_yous([thank_you], request.viewer)
            return view
