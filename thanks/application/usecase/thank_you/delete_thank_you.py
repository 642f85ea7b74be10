"""Delete thank you use case."""

import logfire
from pydantic import BaseModel

from thanks.domain.error import ForbiddenError
from thanks.domain.service import ThankYouGuard, ThankYouService
from thanks.domain.value import SecurityContext, ThankYouId


class DeleteThankYouRequest(BaseModel):
    """Delete thank you request."""

    thank_you_id: int
    actor: SecurityContext


class DeleteThankYouUseCase:
    """Use case for deleting a thank you."""

    def __init__(
        self, thank_you_service: ThankYouService, guard: ThankYouGuard
    ) -> None:
        self.thank_you_service = thank_you_service
        self.guard = guard

    async def execute(self, request: DeleteThankYouRequest) -> None:
        """Execute delete thank you flow.

        Raises:
            NotFoundError: If the thank you does not exist
            ForbiddenError: If the actor may not delete it
            RepositoryError: If storage fails
        """
        thank_you_id = ThankYouId(request.thank_you_id)

        with logfire.span("delete_thank_you.execute", thank_you_id=thank_you_id):
            thank_you = await self.thank_you_service.get(
                thank_you_id, refresh_thanked=False
            )
            if not self.guard.can_delete(thank_you, request.actor):
                logfire.warn(
                    "Thank you delete refused",
                    thank_you_id=thank_you_id,
                    user_id=request.actor.user_id,
                )
                raise ForbiddenError("Thank you", thank_you_id, request.actor.user_id)

            await self.thank_you_service.delete(thank_you)
