"""Thankable: a resolved reference to an entity that can be thanked."""

from typing import Optional

from thanks.domain.model.common import DomainModel
from thanks.domain.value import OwnerClassId, ThankedReference


class Thankable(DomainModel):
    """A named, linkable entity that is the object of a thank you.

    Every thankable has a display name; profile link and image are
    optional capabilities that depend on the entity kind.
    """

    owner_class: OwnerClassId
    id: int
    name: str
    profile_url: Optional[str] = None
    image_url: Optional[str] = None
    extranet_area_id: Optional[int] = None

    @property
    def reference(self) -> ThankedReference:
        """Unresolved reference pointing at this entity."""
        return ThankedReference(owner_class=self.owner_class, id=self.id)
