"""Create tag use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from thanks.application.binder import TagBinder
from thanks.application.error import InvalidRequestError
from thanks.application.view import Presenter, TagView
from thanks.domain.service import TagService
from thanks.domain.value import SecurityContext


class CreateTagRequest(BaseModel):
    """Create tag request."""

    actor: SecurityContext
    payload: dict[str, Any]  # Untrusted request body


class CreateTagUseCase:
    """Use case for adding a tag to the vocabulary."""

    def __init__(
        self, binder: TagBinder, tag_service: TagService, presenter: Presenter
    ) -> None:
        """Initialize create tag use case.

        Args:
            binder: Tag request binder
            tag_service: Tag domain service
            presenter: View presenter
        """
        self.binder = binder
        self.tag_service = tag_service
        self.presenter = presenter

    async def execute(self, request: CreateTagRequest) -> TagView:
        """Execute create tag flow.

        Raises:
            InvalidRequestError: If the payload has violations
            DuplicateTagNameError: If the name is already taken
            RepositoryError: If storage fails
        """
        with logfire.span("create_tag.execute", actor_id=request.actor.user_id):
            result = self.binder.bind_create(request.payload)
            if not result.ok:
                raise InvalidRequestError(result.violations)

            tag = await self.tag_service.create(
                actor_id=request.actor.user_id,
                name=result.command.name.root,
                bg_colour=result.command.bg_colour,
            )
            [view] = await self.presenter.tags([tag])
            return view
