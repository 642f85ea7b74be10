"""Thankable owner classes: handlers and their registry.

Each kind of entity that can be thanked is described by a handler that
knows how to resolve ids of that kind into Thankables and which users a
thank you to such an entity reaches. Handlers are registered at startup;
the resolver never needs to know the concrete kinds.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Optional, Sequence

from thanks.domain.model.thankable import Thankable
from thanks.domain.service.directory import Directory
from thanks.domain.value import GroupId, OwnerClass, OwnerClassId, UserId


class ThankableHandler(ABC):
    """Resolves entities of one owner class."""

    owner_class: ClassVar[OwnerClassId]
    name: ClassVar[str]

    @abstractmethod
    async def resolve(self, ids: Sequence[int]) -> dict[int, Thankable]:
        """Resolve ids of this owner class in one batched lookup.

        Returns:
            Mapping of id to thankable; ids that do not exist are absent
        """
        pass

    @abstractmethod
    async def recipients(self, ids: Sequence[int]) -> set[UserId]:
        """Users reached by thanking the given entities."""
        pass


class UserThankableHandler(ThankableHandler):
    """Individual users: a user is its own recipient."""

    owner_class = OwnerClassId(OwnerClass.USER)
    name = "User"

    def __init__(self, directory: Directory) -> None:
        self.directory = directory

    async def resolve(self, ids: Sequence[int]) -> dict[int, Thankable]:
        users = await self.directory.find_users(UserId(i) for i in ids)
        return {
            user.id: Thankable(
                owner_class=self.owner_class,
                id=user.id,
                name=user.name,
                profile_url=user.profile_url,
                image_url=user.image_url,
                extranet_area_id=user.extranet_area_id,
            )
            for user in users.values()
        }

    async def recipients(self, ids: Sequence[int]) -> set[UserId]:
        return {UserId(i) for i in ids}


class GroupThankableHandler(ThankableHandler):
    """Groups: every member of the group is a recipient."""

    owner_class = OwnerClassId(OwnerClass.GROUP)
    name = "Group"

    def __init__(self, directory: Directory) -> None:
        self.directory = directory

    async def resolve(self, ids: Sequence[int]) -> dict[int, Thankable]:
        groups = await self.directory.find_groups(GroupId(i) for i in ids)
        return {
            group.id: Thankable(
                owner_class=self.owner_class,
                id=group.id,
                name=group.name,
                extranet_area_id=group.extranet_area_id,
            )
            for group in groups.values()
        }

    async def recipients(self, ids: Sequence[int]) -> set[UserId]:
        members = await self.directory.find_group_members(GroupId(i) for i in ids)
        return set().union(*members.values()) if members else set()


class ThankableRegistry:
    """Registry of supported owner classes."""

    def __init__(self, handlers: Iterable[ThankableHandler] = ()) -> None:
        self._handlers: dict[int, ThankableHandler] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: ThankableHandler) -> None:
        """Register a handler for its owner class.

        Raises:
            ValueError: If the owner class already has a handler
        """
        if handler.owner_class in self._handlers:
            raise ValueError(
                f"Owner class {handler.owner_class} is already registered"
            )
        self._handlers[handler.owner_class] = handler

    def get(self, owner_class: int) -> Optional[ThankableHandler]:
        return self._handlers.get(owner_class)

    def supports(self, owner_class: int) -> bool:
        return owner_class in self._handlers

    def owner_classes(self) -> list[OwnerClassId]:
        return sorted(OwnerClassId(c) for c in self._handlers)

    def names(self) -> list[str]:
        """Display names of all supported owner classes, by owner class."""
        return [self._handlers[c].name for c in self.owner_classes()]

    def name_for_class_id(self, owner_class: int) -> Optional[str]:
        handler = self._handlers.get(owner_class)
        return handler.name if handler else None

    def names_for_class_ids(self, owner_classes: Iterable[int]) -> list[str]:
        """Display names for the given owner classes; unknown ones are skipped."""
        return [
            self._handlers[c].name for c in owner_classes if c in self._handlers
        ]
