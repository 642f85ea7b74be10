"""Strongly typed identifiers for thank-you domain entities.

Identifiers are integers assigned by storage (thank yous, tags) or by the
external directory (users, groups).
"""

from typing import NewType

ThankYouId = NewType("ThankYouId", int)
TagId = NewType("TagId", int)
UserId = NewType("UserId", int)
GroupId = NewType("GroupId", int)

# Integer identifying the kind of entity a thanked reference points to
OwnerClassId = NewType("OwnerClassId", int)
