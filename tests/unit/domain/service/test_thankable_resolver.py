"""Unit tests for ThankableResolver."""

import pytest

from thanks.domain.error import ThankableNotFoundError, UnsupportedOwnerClassError
from thanks.domain.service import (
    Directory,
    ThankableHandler,
    ThankableRegistry,
    ThankableResolver,
)
from thanks.domain.value import OwnerClassId, ThankedReference
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def ref(owner_class: int, entity_id: int) -> ThankedReference:
    return ThankedReference(owner_class=OwnerClassId(owner_class), id=entity_id)


class TestResolve:
    """Tests for resolve method."""

    @pytest.mark.asyncio
    async def test_resolves_users_and_groups_in_request_order(self, unit_env):
        resolver = await unit_env.get(ThankableResolver)

        result = await resolver.resolve([ref(3, 7), ref(1, 42), ref(1, 43)])

        assert [(t.owner_class, t.id) for t in result] == [(3, 7), (1, 42), (1, 43)]
        assert [t.name for t in result] == [
            "Engineering",
            "Grace Hopper",
            "Alan Turing",
        ]
        assert result[1].profile_url == "/people/42"

    @pytest.mark.asyncio
    async def test_duplicate_references_collapse(self, unit_env):
        resolver = await unit_env.get(ThankableResolver)

        result = await resolver.resolve([ref(1, 42), ref(1, 42), ref(1, 43)])

        assert [t.id for t in result] == [42, 43]

    @pytest.mark.asyncio
    async def test_one_lookup_per_owner_class(self, unit_env):
        """However many references, each owner class is looked up once."""
        resolver = await unit_env.get(ThankableResolver)
        directory = await unit_env.get(Directory)
        directory.calls.clear()

        await resolver.resolve([ref(1, 42), ref(3, 7), ref(1, 43), ref(1, 1)])

        assert sorted(kind for kind, _ in directory.calls) == ["groups", "users"]
        assert dict(directory.calls)["users"] == [42, 43, 1]

    @pytest.mark.asyncio
    async def test_unsupported_owner_class_rejects_whole_batch(self, unit_env):
        """No entity is looked up and every supported class name is listed."""
        resolver = await unit_env.get(ThankableResolver)
        directory = await unit_env.get(Directory)
        directory.calls.clear()

        with pytest.raises(UnsupportedOwnerClassError) as exc_info:
            await resolver.resolve([ref(1, 42), ref(99, 1)])

        assert exc_info.value.owner_classes == [99]
        assert exc_info.value.supported == ["User", "Group"]
        assert directory.calls == []

    @pytest.mark.asyncio
    async def test_missing_entities_are_each_reported(self, unit_env):
        resolver = await unit_env.get(ThankableResolver)

        with pytest.raises(ThankableNotFoundError) as exc_info:
            await resolver.resolve([ref(1, 42), ref(1, 500), ref(3, 600)])

        assert exc_info.value.references == [ref(1, 500), ref(3, 600)]


class TestRecipients:
    """Tests for recipients method."""

    @pytest.mark.asyncio
    async def test_union_of_users_and_group_members(self, unit_env):
        resolver = await unit_env.get(ThankableResolver)
        thanked = await resolver.resolve([ref(1, 1), ref(3, 7), ref(1, 42)])

        recipients = await resolver.recipients(thanked)

        assert recipients == {1, 42, 43}


class TestRefresh:
    """Tests for refresh method."""

    @pytest.mark.asyncio
    async def test_refresh_picks_up_renamed_entities(self, unit_env):
        resolver = await unit_env.get(ThankableResolver)
        directory = await unit_env.get(Directory)
        [stored] = await resolver.resolve([ref(1, 42)])

        directory.add_user(42, "Grace Brewster Hopper")
        [refreshed] = await resolver.refresh([stored])

        assert refreshed.name == "Grace Brewster Hopper"

    @pytest.mark.asyncio
    async def test_refresh_keeps_snapshot_of_vanished_entities(self, unit_env):
        resolver = await unit_env.get(ThankableResolver)
        directory = await unit_env.get(Directory)
        [stored] = await resolver.resolve([ref(1, 43)])

        del directory.users[43]
        [refreshed] = await resolver.refresh([stored])

        assert refreshed == stored


class TestRegistry:
    """Tests for the owner class registry."""

    def test_new_owner_class_registers_without_resolver_changes(self):
        class ProjectHandler(ThankableHandler):
            owner_class = OwnerClassId(12)
            name = "Project"

            async def resolve(self, ids):
                return {}

            async def recipients(self, ids):
                return set()

        registry = ThankableRegistry([ProjectHandler()])

        assert registry.supports(12)
        assert registry.names() == ["Project"]
        assert registry.name_for_class_id(1) is None

    def test_duplicate_registration_is_rejected(self):
        class ProjectHandler(ThankableHandler):
            owner_class = OwnerClassId(12)
            name = "Project"

            async def resolve(self, ids):
                return {}

            async def recipients(self, ids):
                return set()

        registry = ThankableRegistry([ProjectHandler()])

        with pytest.raises(ValueError, match="already registered"):
            registry.register(ProjectHandler())

    @pytest.mark.asyncio
    async def test_default_owner_class_names(self, unit_env):
        registry = await unit_env.get(ThankableRegistry)

        assert registry.owner_classes() == [1, 3]
        assert registry.names() == ["User", "Group"]
        assert registry.names_for_class_ids([3, 99, 1]) == ["Group", "User"]
