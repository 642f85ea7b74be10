"""Domain value objects."""

from thanks.domain.value.identifiers import (
    GroupId,
    OwnerClassId,
    TagId,
    ThankYouId,
    UserId,
)
from thanks.domain.value.types import (
    OwnerClass,
    SecurityContext,
    TagName,
    ThankedReference,
)

__all__ = [
    # Identifiers
    "ThankYouId",
    "TagId",
    "UserId",
    "GroupId",
    "OwnerClassId",
    # Types
    "OwnerClass",
    "SecurityContext",
    "TagName",
    "ThankedReference",
]
