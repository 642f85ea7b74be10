"""Unit tests for ThankYouBinder."""

import pytest

from thanks.application.binder import ThankYouBinder
from thanks.domain.model import FeatureFlags
from thanks.domain.service import TagService, ThankableResolver
from thanks.domain.value import UserId
from thanks.util.messages import Messages
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

messages = Messages()


async def make_binder(unit_env, enabled=False, mandatory=False) -> ThankYouBinder:
    return ThankYouBinder(
        flags=FeatureFlags(tags_enabled=enabled, tags_mandatory=mandatory),
        thankable_resolver=await unit_env.get(ThankableResolver),
        tag_service=await unit_env.get(TagService),
        messages=messages,
    )


def names(result) -> list[str]:
    return [v.name for v in result.violations]


class TestBindCreate:
    """Tests for bind_create."""

    @pytest.mark.asyncio
    async def test_valid_payload_resolves_thanked(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create(
            {
                "thanked": [{"oclass": 1, "id": 42}, {"oclass": "3", "id": 7.0}],
                "description": "Great job",
            }
        )

        assert result.ok
        assert [t.name for t in result.command.thanked] == [
            "Grace Hopper",
            "Engineering",
        ]
        assert result.command.description == "Great job"
        assert result.command.tags == []

    @pytest.mark.asyncio
    async def test_duplicate_pairs_collapse_in_order(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create(
            {
                "thanked": [
                    {"oclass": 1, "id": 43},
                    {"oclass": 1, "id": 42},
                    {"oclass": 1, "id": "43"},
                ],
                "description": "Thanks both",
            }
        )

        assert [t.id for t in result.command.thanked] == [43, 42]

    @pytest.mark.asyncio
    async def test_empty_thanked_and_description_in_order(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create({"thanked": [], "description": ""})

        assert names(result) == ["thanked", "description"]
        assert result.violations[0].reason == messages("thanked.error.empty")
        assert result.violations[1].reason == messages("description.error.empty")

    @pytest.mark.asyncio
    async def test_missing_fields(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create({})

        assert names(result) == ["thanked", "description"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("thanked", "key"),
        [
            ("someone", "thanked.error.not_array"),
            ({"oclass": 1, "id": 42}, "thanked.error.not_array"),
            ([42], "thanked.error.malformed"),
            ([{"oclass": 1}], "thanked.error.malformed"),
            ([{"oclass": True, "id": 42}], "thanked.error.malformed"),
        ],
    )
    async def test_malformed_thanked(self, unit_env, thanked, key):
        binder = await make_binder(unit_env)

        result = await binder.bind_create({"thanked": thanked, "description": "x"})

        assert [v.reason for v in result.violations] == [messages(key)]

    @pytest.mark.asyncio
    async def test_unsupported_owner_class_lists_supported_names(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create(
            {
                "thanked": [{"oclass": 1, "id": 42}, {"oclass": 99, "id": 1}],
                "description": "x",
            }
        )

        assert names(result) == ["thanked"]
        assert result.violations[0].reason == messages(
            "thanked.error.not_supported", "User, Group"
        )

    @pytest.mark.asyncio
    async def test_each_missing_entity_is_named(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create(
            {
                "thanked": [
                    {"oclass": 1, "id": 500},
                    {"oclass": 1, "id": 42},
                    {"oclass": 3, "id": 501},
                ],
                "description": "x",
            }
        )

        assert [v.reason for v in result.violations] == [
            messages("thanked.error.not_found", "1:500"),
            messages("thanked.error.not_found", "3:501"),
        ]

    @pytest.mark.asyncio
    async def test_numeric_description_is_coerced(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create(
            {"thanked": [{"oclass": 1, "id": 42}], "description": 100}
        )

        assert result.command.description == "100"

    @pytest.mark.asyncio
    async def test_non_string_description(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_create(
            {"thanked": [{"oclass": 1, "id": 42}], "description": ["x"]}
        )

        assert [v.reason for v in result.violations] == [
            messages("description.error.not_string")
        ]


class TestTags:
    """Tests for tag binding on create."""

    PAYLOAD = {"thanked": [{"oclass": 1, "id": 42}], "description": "x"}

    @pytest.mark.asyncio
    async def test_tags_while_disabled(self, unit_env):
        binder = await make_binder(unit_env, enabled=False)

        result = await binder.bind_create({**self.PAYLOAD, "tags": [1]})

        assert [v.reason for v in result.violations] == [
            messages("tags.error.disabled")
        ]

    @pytest.mark.asyncio
    async def test_mandatory_tags_missing(self, unit_env):
        binder = await make_binder(unit_env, enabled=True, mandatory=True)

        missing = await binder.bind_create(self.PAYLOAD)
        empty = await binder.bind_create({**self.PAYLOAD, "tags": []})

        assert names(missing) == ["tags"]
        assert names(empty) == ["tags"]

    @pytest.mark.asyncio
    async def test_tags_resolved_and_deduplicated(self, unit_env):
        tag_service = await unit_env.get(TagService)
        teamwork = await tag_service.create(UserId(1), "Teamwork")
        courage = await tag_service.create(UserId(1), "Courage")
        binder = await make_binder(unit_env, enabled=True)

        result = await binder.bind_create(
            {**self.PAYLOAD, "tags": [courage.id, str(teamwork.id), courage.id]}
        )

        assert [t.name.root for t in result.command.tags] == ["Courage", "Teamwork"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("tags", "key"),
        [
            ("1,2", "tags.error.not_array"),
            ([1, "two"], "tags.error.not_integers"),
        ],
    )
    async def test_malformed_tags(self, unit_env, tags, key):
        binder = await make_binder(unit_env, enabled=True)

        result = await binder.bind_create({**self.PAYLOAD, "tags": tags})

        assert [v.reason for v in result.violations] == [messages(key)]

    @pytest.mark.asyncio
    async def test_unknown_tag_ids_are_each_named(self, unit_env):
        binder = await make_binder(unit_env, enabled=True)

        result = await binder.bind_create({**self.PAYLOAD, "tags": [8, 9]})

        assert [v.reason for v in result.violations] == [
            messages("tags.error.not_found", 8),
            messages("tags.error.not_found", 9),
        ]

    @pytest.mark.asyncio
    async def test_all_violations_collected(self, unit_env):
        binder = await make_binder(unit_env, enabled=False)

        result = await binder.bind_create(
            {"thanked": "x", "description": " ", "tags": [1]}
        )

        assert names(result) == ["thanked", "description", "tags"]


class TestBindUpdate:
    """Tests for bind_update."""

    @pytest.mark.asyncio
    async def test_empty_payload_changes_nothing(self, unit_env):
        binder = await make_binder(unit_env, enabled=True, mandatory=True)

        result = await binder.bind_update({})

        assert result.ok
        assert result.command.thanked is None
        assert result.command.description is None
        assert result.command.tags is None

    @pytest.mark.asyncio
    async def test_only_description(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_update({"description": "x"})

        assert result.command.description == "x"
        assert result.command.thanked is None

    @pytest.mark.asyncio
    async def test_supplied_fields_are_validated(self, unit_env):
        binder = await make_binder(unit_env)

        result = await binder.bind_update({"thanked": [], "description": ""})

        assert names(result) == ["thanked", "description"]

    @pytest.mark.asyncio
    async def test_mandatory_applies_only_when_tags_supplied(self, unit_env):
        binder = await make_binder(unit_env, enabled=True, mandatory=True)

        result = await binder.bind_update({"tags": []})

        assert names(result) == ["tags"]
