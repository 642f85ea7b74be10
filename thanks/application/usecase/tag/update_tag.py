"""Update tag use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from thanks.application.binder import TagBinder
from thanks.application.error import InvalidRequestError
from thanks.application.view import Presenter, TagView
from thanks.domain.service import UNSET, TagService
from thanks.domain.value import SecurityContext, TagId


class UpdateTagRequest(BaseModel):
    """Update tag request."""

    tag_id: int
    actor: SecurityContext
    payload: dict[str, Any]  # Untrusted request body, every field optional


class UpdateTagUseCase:
    """Use case for renaming, (de)activating or recolouring a tag."""

    def __init__(
        self, binder: TagBinder, tag_service: TagService, presenter: Presenter
    ) -> None:
        """Initialize update tag use case.

        Args:
            binder: Tag request binder
            tag_service: Tag domain service
            presenter: View presenter
        """
        self.binder = binder
        self.tag_service = tag_service
        self.presenter = presenter

    async def execute(self, request: UpdateTagRequest) -> TagView:
        """Execute update tag flow.

        Raises:
            InvalidRequestError: If the payload has violations
            NotFoundError: If the tag does not exist
            DuplicateTagNameError: If the new name belongs to another tag
            RepositoryError: If storage fails
        """
        tag_id = TagId(request.tag_id)

        with logfire.span("update_tag.execute", tag_id=tag_id):
            result = self.binder.bind_update(request.payload)
            if not result.ok:
                raise InvalidRequestError(result.violations)

            command = result.command
            supplied = command.model_fields_set
            tag = await self.tag_service.get_by_id(tag_id)
            updated = await self.tag_service.update(
                tag,
                request.actor.user_id,
                name=command.name.root if "name" in supplied else UNSET,
                active=command.active if "active" in supplied else UNSET,
                bg_colour=command.bg_colour if "bg_colour" in supplied else UNSET,
            )
            [view] = await self.presenter.tags([updated])
            return view
