"""Unit tests for row/domain mappers."""

from datetime import datetime

from sqlalchemy import Text

from thanks.domain.model import FeatureFlags, Thankable
from thanks.persistence.mappers import (
    row_to_tag,
    row_to_thank_you,
    row_to_thankable,
    rows_to_feature_flags,
    thankable_to_dict,
)
from thanks.persistence.tables import tags_table


class TestThankableMapping:
    """Tests for thanked snapshot rows."""

    def test_snapshot_row_keeps_position_and_links(self):
        thankable = Thankable(
            owner_class=1, id=42, name="Grace Hopper", profile_url="/people/42"
        )

        row = thankable_to_dict(thankable, thank_you_id=9, position=2)

        assert row["thank_you_id"] == 9
        assert row["item_id"] == 42
        assert row["position"] == 2
        assert row_to_thankable(row) == thankable


class TestThankYouMapping:
    """Tests for assembling thank yous from rows."""

    def test_assembles_children(self):
        now = datetime.now()
        tag = row_to_tag(
            {
                "id": 3,
                "name": "Teamwork",
                "active": True,
                "bg_colour": None,
                "created_by": 1,
                "created_date": now,
                "modified_by": 1,
                "modified_date": now,
            }
        )
        thanked = [Thankable(owner_class=3, id=7, name="Engineering")]

        thank_you = row_to_thank_you(
            {"id": 9, "author_id": 42, "description": "Thanks", "date_created": now},
            thanked=thanked,
            recipient_ids=[42, 43],
            tags=[tag],
        )

        assert thank_you.id == 9
        assert thank_you.thanked == thanked
        assert thank_you.recipient_ids == {42, 43}
        assert thank_you.tags[0].name.root == "Teamwork"


class TestFeatureFlagMapping:
    """Tests for feature flag rows."""

    def test_stored_rows_override_defaults(self):
        flags = rows_to_feature_flags(
            [
                {"name": "tags_enabled", "value": True},
                {"name": "retired_flag", "value": True},
            ],
            FeatureFlags(tags_enabled=False, tags_mandatory=True),
        )

        assert flags == FeatureFlags(tags_enabled=True, tags_mandatory=True)


class TestTagsTable:
    """Tests for the tags table definition."""

    def test_colour_column_has_no_length_limit(self):
        column_type = tags_table.c.bg_colour.type

        assert isinstance(column_type, Text)
        assert column_type.length is None
