"""Create thank you use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from thanks.application.binder import ThankYouBinder
from thanks.application.error import InvalidRequestError
from thanks.domain.error import NotificationError
from thanks.domain.service import ThankYouService
from thanks.domain.value import SecurityContext


class CreateThankYouRequest(BaseModel):
    """Create thank you request."""

    actor: SecurityContext
    payload: dict[str, Any]  # Untrusted request body


class CreateThankYouResponse(BaseModel):
    """Create thank you response."""

    thank_you_id: int
    notified: bool


class CreateThankYouUseCase:
    """Use case for thanking one or more entities."""

    def __init__(
        self, binder: ThankYouBinder, thank_you_service: ThankYouService
    ) -> None:
        """Initialize create thank you use case.

        Args:
            binder: Thank-you request binder
            thank_you_service: Thank-you domain service
        """
        self.binder = binder
        self.thank_you_service = thank_you_service

    async def execute(self, request: CreateThankYouRequest) -> CreateThankYouResponse:
        """Execute create thank you flow.

        Steps:
        1. Bind the payload, resolving thanked entities and tags
        2. Build the thank you and its recipients
        3. Save it
        4. Notify recipients; a failure here is logged and reported in
           the response but does not undo the save

        Raises:
            InvalidRequestError: If the payload has violations
            RepositoryError: If the thank you could not be saved
        """
        with logfire.span("create_thank_you.execute", author_id=request.actor.user_id):
            result = await self.binder.bind_create(request.payload)
            if not result.ok:
                raise InvalidRequestError(result.violations)

            command = result.command
            thank_you = await self.thank_you_service.create(
                author_id=request.actor.user_id,
                description=command.description,
                thanked=command.thanked,
                tags=command.tags,
            )
            saved = await self.thank_you_service.save(thank_you)

            notified = True
            try:
                await self.thank_you_service.notify(saved)
            except NotificationError as e:
                logfire.error(
                    "Thank you created but notifying recipients failed",
                    thank_you_id=saved.id,
                    error=str(e),
                )
                notified = False

            logfire.info(
                "Thank you created", thank_you_id=saved.id, notified=notified
            )
            return CreateThankYouResponse(thank_you_id=saved.id, notified=notified)
