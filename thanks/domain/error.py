"""Domain layer errors."""

from typing import Sequence


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the actor may not modify a resource."""

    def __init__(self, resource: str, resource_id: object, user_id: object):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class UnsupportedOwnerClassError(DomainError):
    """Raised when a thanked reference names an unregistered owner class."""

    def __init__(self, owner_classes: Sequence[int], supported: Sequence[str]):
        self.owner_classes = list(owner_classes)
        self.supported = list(supported)
        super().__init__(
            f"Unsupported owner classes {self.owner_classes}, "
            f"supported: {', '.join(self.supported)}"
        )


class ThankableNotFoundError(DomainError):
    """Raised when thanked references point to entities that do not exist."""

    def __init__(self, references: Sequence[object]):
        self.references = list(references)
        super().__init__(
            "Thanked entities not found: "
            + ", ".join(str(ref) for ref in self.references)
        )


class InvalidTagNameError(DomainError):
    """Raised when a tag name is empty, too long or uses invalid characters."""

    def __init__(self, name: object, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid tag name {name!r}: {reason}")


class DuplicateTagNameError(DomainError):
    """Raised when a tag name is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tag name already exists: {name}")


class RepositoryError(DomainError):
    """Raised when storage fails; nothing from the operation was committed."""

    pass


class NotificationError(DomainError):
    """Raised when notifying recipients of a saved thank you fails."""

    pass
