"""Directory records for users and groups.

Users and groups are owned by the external directory; the service only
reads them to resolve thanked entities and display names.
"""

from typing import Optional

from thanks.domain.model.common import DomainModel
from thanks.domain.value import GroupId, UserId


class User(DomainModel):
    """A person known to the directory."""

    id: UserId
    name: str
    profile_url: Optional[str] = None
    image_url: Optional[str] = None
    extranet_area_id: Optional[int] = None


class Group(DomainModel):
    """A group of users known to the directory."""

    id: GroupId
    name: str
    extranet_area_id: Optional[int] = None
