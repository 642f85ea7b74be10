"""Update configuration use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from thanks.application.binder import ConfigBinder
from thanks.application.error import InvalidRequestError
from thanks.domain.error import ForbiddenError
from thanks.domain.service import FeatureFlagService, ThankYouGuard
from thanks.domain.value import SecurityContext


class UpdateConfigRequest(BaseModel):
    """Update configuration request."""

    actor: SecurityContext
    payload: dict[str, Any]  # Untrusted request body


class UpdateConfigUseCase:
    """Use case for changing feature flags."""

    def __init__(
        self,
        binder: ConfigBinder,
        feature_flag_service: FeatureFlagService,
        guard: ThankYouGuard,
    ) -> None:
        """Initialize update config use case.

        Args:
            binder: Feature flag request binder
            feature_flag_service: Feature flag domain service
            guard: Authorization rules
        """
        self.binder = binder
        self.feature_flag_service = feature_flag_service
        self.guard = guard

    async def execute(self, request: UpdateConfigRequest) -> None:
        """Execute update config flow.

        Raises:
            ForbiddenError: If the actor lacks admin access
            InvalidRequestError: If a flag is unknown or not a boolean
            RepositoryError: If storage fails
        """
        with logfire.span("update_config.execute", user_id=request.actor.user_id):
            if not self.guard.can_configure(request.actor):
                logfire.warn(
                    "Configuration change refused", user_id=request.actor.user_id
                )
                raise ForbiddenError("Configuration", "flags", request.actor.user_id)

            result = self.binder.bind_update(request.payload)
            if not result.ok:
                raise InvalidRequestError(result.violations)

            changes = result.command.changes()
            if changes:
                await self.feature_flag_service.update_flags(**changes)
