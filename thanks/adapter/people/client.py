"""People directory clients.

The production client talks to the intranet's people API; the mock keeps a
seeded in-memory directory for tests and local development.
"""

from typing import Any, Callable, Iterable, Optional, TypeVar

import httpx
import logfire

from thanks.adapter.error import DirectoryError
from thanks.domain.model.user import Group, User
from thanks.domain.service.directory import Directory
from thanks.domain.value import GroupId, UserId

T = TypeVar("T")


class PeopleApiDirectory(Directory):
    """Directory backed by the people HTTP API.

    Every lookup is one request carrying all ids as a comma-separated
    ``ids`` query parameter.
    """

    def __init__(
        self, base_url: str, api_key: Optional[str] = None, timeout: float = 10.0
    ) -> None:
        """Initialize people API directory.

        Args:
            base_url: People API root, e.g. https://intranet/api/people/v1
            api_key: Bearer token for the API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    async def find_users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        ids = sorted(set(user_ids))
        if not ids:
            return {}
        return await self._get("/users", _users, ids=ids)

    async def find_groups(self, group_ids: Iterable[GroupId]) -> dict[GroupId, Group]:
        ids = sorted(set(group_ids))
        if not ids:
            return {}
        return await self._get("/groups", _groups, ids=ids)

    async def find_group_members(
        self, group_ids: Iterable[GroupId]
    ) -> dict[GroupId, set[UserId]]:
        ids = sorted(set(group_ids))
        if not ids:
            return {}
        return await self._get("/groups/members", _members, ids=ids)

    async def has_admin_access(self, user_id: UserId) -> bool:
        return await self._get(
            f"/users/{user_id}/permissions/thankyou-admin",
            lambda data: bool(data.get("granted", False)),
        )

    async def _get(
        self,
        path: str,
        parse: Callable[[Any], T],
        ids: Optional[list[int]] = None,
    ) -> T:
        """GET a people API resource and parse its ``data`` member.

        Raises:
            DirectoryError: On transport errors, non-200 responses or
                malformed bodies
        """
        params = {"ids": ",".join(str(i) for i in ids)} if ids is not None else None
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        with logfire.span("people_api.get", path=path, count=len(ids or [])):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        f"{self.base_url}{path}",
                        params=params,
                        headers=headers,
                        timeout=self.timeout,
                    )

                    if response.status_code != 200:
                        logfire.error(
                            "People API request failed",
                            path=path,
                            status_code=response.status_code,
                            error=response.text,
                        )
                        raise DirectoryError(
                            f"People API request failed: {response.status_code}"
                        )

                    return parse(response.json()["data"])

            except httpx.HTTPError as e:
                logfire.error("People API HTTP error", path=path, error=str(e))
                raise DirectoryError(f"HTTP error calling people API: {e}")
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                # ValueError covers bad JSON and records failing model validation
                logfire.error(
                    "People API returned a malformed body", path=path, error=str(e)
                )
                raise DirectoryError(f"Malformed people API response: {e}")


def _users(data: list[dict[str, Any]]) -> dict[UserId, User]:
    users = [User.model_validate(item) for item in data]
    return {user.id: user for user in users}


def _groups(data: list[dict[str, Any]]) -> dict[GroupId, Group]:
    groups = [Group.model_validate(item) for item in data]
    return {group.id: group for group in groups}


def _members(data: list[dict[str, Any]]) -> dict[GroupId, set[UserId]]:
    return {
        GroupId(item["group_id"]): {UserId(u) for u in item["user_ids"]}
        for item in data
    }


class MockDirectory(Directory):
    """In-memory directory for testing.

    Seeded with a few users and groups; tests can add more and grant admin
    access. Records every lookup so batching can be asserted.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.groups: dict[GroupId, Group] = {}
        self.members: dict[GroupId, set[UserId]] = {}
        self.admins: set[UserId] = set()
        self.calls: list[tuple[str, list[int]]] = []

        self.add_user(UserId(1), "Ada Admin")
        self.add_user(UserId(42), "Grace Hopper")
        self.add_user(UserId(43), "Alan Turing")
        self.add_group(GroupId(7), "Engineering", [UserId(42), UserId(43)])
        self.admins.add(UserId(1))

    def add_user(self, user_id: UserId, name: str) -> User:
        user = User(
            id=user_id,
            name=name,
            profile_url=f"/people/{user_id}",
            image_url=f"/people/{user_id}/avatar",
        )
        self.users[user_id] = user
        return user

    def add_group(
        self, group_id: GroupId, name: str, member_ids: Iterable[UserId] = ()
    ) -> Group:
        group = Group(id=group_id, name=name)
        self.groups[group_id] = group
        self.members[group_id] = set(member_ids)
        return group

    async def find_users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        ids = list(user_ids)
        self.calls.append(("users", ids))
        return {i: self.users[i] for i in ids if i in self.users}

    async def find_groups(self, group_ids: Iterable[GroupId]) -> dict[GroupId, Group]:
        ids = list(group_ids)
        self.calls.append(("groups", ids))
        return {i: self.groups[i] for i in ids if i in self.groups}

    async def find_group_members(
        self, group_ids: Iterable[GroupId]
    ) -> dict[GroupId, set[UserId]]:
        ids = list(group_ids)
        self.calls.append(("members", ids))
        return {i: set(self.members[i]) for i in ids if i in self.members}

    async def has_admin_access(self, user_id: UserId) -> bool:
        return user_id in self.admins
