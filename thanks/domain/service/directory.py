"""Directory interface: the external source of users and groups."""

from abc import ABC, abstractmethod
from typing import Iterable

from thanks.domain.model.user import Group, User
from thanks.domain.value import GroupId, UserId


class Directory(ABC):
    """Lookup of users, groups and their permissions.

    Implemented by adapters (HTTP people API in production, an in-memory
    directory in tests). All lookups are batched: one call per kind per
    request.
    """

    @abstractmethod
    async def find_users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Look up users by id.

        Returns:
            Mapping of id to user; unknown ids are absent

        Raises:
            DirectoryError: If the directory cannot be reached
        """
        pass

    @abstractmethod
    async def find_groups(self, group_ids: Iterable[GroupId]) -> dict[GroupId, Group]:
        """Look up groups by id.

        Returns:
            Mapping of id to group; unknown ids are absent
        """
        pass

    @abstractmethod
    async def find_group_members(
        self, group_ids: Iterable[GroupId]
    ) -> dict[GroupId, set[UserId]]:
        """Look up the members of each group.

        Returns:
            Mapping of group id to member ids; unknown groups are absent
        """
        pass

    @abstractmethod
    async def has_admin_access(self, user_id: UserId) -> bool:
        """Whether the user currently holds the thank-you admin capability."""
        pass
