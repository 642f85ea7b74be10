"""Update thank you use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from thanks.application.binder import ThankYouBinder
from thanks.application.error import InvalidRequestError
from thanks.domain.error import ForbiddenError
from thanks.domain.service import ThankYouGuard, ThankYouService
from thanks.domain.value import SecurityContext, ThankYouId


class UpdateThankYouRequest(BaseModel):
    """Update thank you request."""

    thank_you_id: int
    actor: SecurityContext
    payload: dict[str, Any]  # Untrusted request body, every field optional


class UpdateThankYouResponse(BaseModel):
    """Update thank you response."""

    thank_you_id: int
    changed: bool


class UpdateThankYouUseCase:
    """Use case for changing a thank you's description, thanked or tags."""

    def __init__(
        self,
        binder: ThankYouBinder,
        thank_you_service: ThankYouService,
        guard: ThankYouGuard,
    ) -> None:
        """Initialize update thank you use case.

        Args:
            binder: Thank-you request binder
            thank_you_service: Thank-you domain service
            guard: Authorization rules
        """
        self.binder = binder
        self.thank_you_service = thank_you_service
        self.guard = guard

    async def execute(self, request: UpdateThankYouRequest) -> UpdateThankYouResponse:
        """Execute update thank you flow.

        Only supplied fields are applied; anything else is left as stored.

        Raises:
            InvalidRequestError: If the payload has violations
            NotFoundError: If the thank you does not exist
            ForbiddenError: If the actor may not edit it
            RepositoryError: If the change could not be saved
        """
        thank_you_id = ThankYouId(request.thank_you_id)

        with logfire.span(
            "update_thank_you.execute",
            thank_you_id=thank_you_id,
            user_id=request.actor.user_id,
        ):
            result = await self.binder.bind_update(request.payload)
            if not result.ok:
                raise InvalidRequestError(result.violations)

            thank_you = await self.thank_you_service.get(
                thank_you_id, refresh_thanked=False
            )
            if not self.guard.can_edit(thank_you, request.actor):
                logfire.warn(
                    "Thank you edit refused",
                    thank_you_id=thank_you_id,
                    user_id=request.actor.user_id,
                )
                raise ForbiddenError("Thank you", thank_you_id, request.actor.user_id)

            command = result.command
            updated = thank_you
            if command.description is not None:
                updated = updated.with_description(command.description)
            if command.thanked is not None:
                updated = await self.thank_you_service.set_thanked(
                    updated, command.thanked
                )
            if command.tags is not None:
                updated = updated.with_tags(command.tags)

            if updated == thank_you:
                logfire.info("Thank you unchanged", thank_you_id=thank_you_id)
                return UpdateThankYouResponse(thank_you_id=thank_you_id, changed=False)

            await self.thank_you_service.save(updated)
            return UpdateThankYouResponse(thank_you_id=thank_you_id, changed=True)
