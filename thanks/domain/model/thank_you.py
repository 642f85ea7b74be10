"""ThankYou aggregate root."""

from datetime import datetime
from typing import Any, Iterable, Optional

from pydantic import Field, field_validator

from thanks.domain.model.common import DomainModel
from thanks.domain.model.tag import Tag
from thanks.domain.model.thankable import Thankable
from thanks.domain.value import ThankYouId, UserId


class ThankYou(DomainModel):
    """ThankYou aggregate root.

    A public note from an author to one or more thankable entities:
    - thanked must hold at least one entity
    - recipient_ids are the users implied by thanked and only ever change
      together with it (see ``with_thanked``)
    - author and date_created never change after creation
    """

    id: Optional[ThankYouId] = None
    author_id: UserId
    description: str = Field(min_length=1)
    date_created: datetime = Field(default_factory=datetime.now)
    thanked: list[Thankable] = Field(min_length=1)
    recipient_ids: frozenset[UserId] = frozenset()
    tags: list[Tag] = Field(default_factory=list)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Reject whitespace-only descriptions."""
        if not v.strip():
            raise ValueError("Description must not be empty")
        return v

    def with_description(self, description: str) -> "ThankYou":
        """Return a copy with a new description."""
        return self._updated(description=description)

    def with_thanked(
        self, thanked: Iterable[Thankable], recipient_ids: Iterable[UserId]
    ) -> "ThankYou":
        """Return a copy thanking new entities.

        Recipients are replaced in the same step so they always match thanked.
        """
        return self._updated(
            thanked=list(thanked), recipient_ids=frozenset(recipient_ids)
        )

    def with_tags(self, tags: Iterable[Tag]) -> "ThankYou":
        """Return a copy carrying the given tags."""
        return self._updated(tags=list(tags))

    def with_id(self, thank_you_id: ThankYouId) -> "ThankYou":
        """Return a copy with the storage-assigned identifier."""
        return self.model_copy(update={"id": thank_you_id})

    def is_author(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    def _updated(self, **changes: Any) -> "ThankYou":
        # model_copy skips validation, so rebuild to re-check invariants
        return type(self).model_validate({**dict(self), **changes})
