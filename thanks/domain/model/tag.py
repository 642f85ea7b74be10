"""Tag entity for classifying thank yous."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from thanks.domain.model.common import DomainModel
from thanks.domain.value import TagId, TagName, UserId


class Tag(DomainModel):
    """Tag entity.

    Tags (also known as core values) classify thank yous. Names are unique
    case-insensitively. ``id`` is None until the tag is first saved.
    """

    id: Optional[TagId] = None
    name: TagName
    active: bool = True
    bg_colour: Optional[str] = None
    created_by: UserId
    created_date: datetime = Field(default_factory=datetime.now)
    modified_by: UserId
    modified_date: datetime = Field(default_factory=datetime.now)
