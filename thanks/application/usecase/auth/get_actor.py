"""Get actor use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from thanks.application.error import AuthenticationError
from thanks.application.usecase.base import BaseUseCase
from thanks.domain.service import Directory, JWTService
from thanks.domain.value import SecurityContext


class GetActorRequest(BaseModel):
    """Get actor request."""

    token: Optional[str] = None  # JWT from the auth cookie
    admin_mode: bool = False


class GetActorUseCase(BaseUseCase):
    """Builds the security context for the current request."""

    def __init__(self, jwt_service: JWTService, directory: Directory) -> None:
        """Initialize get actor use case.

        Args:
            jwt_service: JWT token domain service
            directory: Directory for the admin capability check
        """
        self.jwt_service = jwt_service
        self.directory = directory

    async def execute(self, request: GetActorRequest) -> SecurityContext:
        """Execute get actor flow.

        Admin access is read from the directory on every call so that role
        changes take effect immediately.

        Returns:
            Security context for the authenticated user

        Raises:
            AuthenticationError: If the token is missing or invalid
        """
        user_id = self.jwt_service.get_user_id_from_token(request.token)
        if user_id is None:
            raise AuthenticationError("Authentication required")

        with logfire.span("get_actor.execute", user_id=user_id):
            has_admin_access = await self.directory.has_admin_access(user_id)
            return SecurityContext(
                user_id=user_id,
                admin_mode=request.admin_mode,
                has_admin_access=has_admin_access,
            )
