"""Domain value objects for thank yous and tags.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import IntEnum

from pydantic import field_validator

from thanks.domain.value.common import RootValueObject, ValueObject
from thanks.domain.value.identifiers import OwnerClassId, UserId

# No control characters
_TAG_NAME_PATTERN = re.compile(r"^[^\x00-\x1f\x7f]+$")


class OwnerClass(IntEnum):
    """Owner classes shipped with the service.

    The set of thankable owner classes is open; these are the built-in kinds
    registered by default.
    """

    USER = 1
    GROUP = 3


class TagName(RootValueObject[str]):
    """Tag name.

    Must contain at least one non-whitespace character, no control
    characters, and at most 255 characters (the storage limit). The
    configurable, usually shorter, limit is enforced by the tag service.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not v.strip():
            raise ValueError("Tag name must not be empty")
        if len(v) > 255:
            raise ValueError("Tag name must be at most 255 characters")
        if not _TAG_NAME_PATTERN.match(v):
            raise ValueError("Tag name must not contain control characters")
        return v

    def normalized(self) -> str:
        """Case-insensitive key used for uniqueness checks."""
        return self.root.casefold()


class ThankedReference(ValueObject):
    """Unresolved reference to a thankable entity: owner class plus id."""

    owner_class: OwnerClassId
    id: int

    def __str__(self) -> str:
        return f"{self.owner_class}:{self.id}"


class SecurityContext(ValueObject):
    """Who is acting on a request, and with which elevated rights.

    admin_mode: the request asked for admin treatment (e.g. an admin panel)
    has_admin_access: the actor currently holds the admin-panel capability
    """

    user_id: UserId
    admin_mode: bool = False
    has_admin_access: bool = False
