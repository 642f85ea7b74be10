"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable

from thanks.domain.model import FeatureFlags, Tag, ThankYou, Thankable
from thanks.domain.value import (
    OwnerClassId,
    TagId,
    TagName,
    ThankYouId,
    UserId,
)


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=TagName(row["name"]),
        active=row["active"],
        bg_colour=row.get("bg_colour"),
        created_by=UserId(row["created_by"]),
        created_date=row["created_date"],
        modified_by=UserId(row["modified_by"]),
        modified_date=row["modified_date"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict (without the id)."""
    return {
        "name": tag.name.root,
        "active": tag.active,
        "bg_colour": tag.bg_colour,
        "created_by": tag.created_by,
        "created_date": tag.created_date,
        "modified_by": tag.modified_by,
        "modified_date": tag.modified_date,
    }


def row_to_thankable(row: Dict[str, Any]) -> Thankable:
    """Convert a thanked-snapshot row to a Thankable."""
    return Thankable(
        owner_class=OwnerClassId(row["owner_class"]),
        id=row["item_id"],
        name=row["name"],
        profile_url=row.get("profile_url"),
        image_url=row.get("image_url"),
        extranet_area_id=row.get("extranet_area_id"),
    )


def thankable_to_dict(
    thankable: Thankable, thank_you_id: ThankYouId, position: int
) -> Dict[str, Any]:
    """Convert a Thankable to a thanked-snapshot row."""
    return {
        "thank_you_id": thank_you_id,
        "owner_class": thankable.owner_class,
        "item_id": thankable.id,
        "position": position,
        "name": thankable.name,
        "profile_url": thankable.profile_url,
        "image_url": thankable.image_url,
        "extranet_area_id": thankable.extranet_area_id,
    }


def thank_you_to_dict(thank_you: ThankYou) -> Dict[str, Any]:
    """Convert ThankYou to its main-table row (without the id)."""
    return {
        "author_id": thank_you.author_id,
        "description": thank_you.description,
        "date_created": thank_you.date_created,
    }


def row_to_thank_you(
    row: Dict[str, Any],
    thanked: Iterable[Thankable],
    recipient_ids: Iterable[int],
    tags: Iterable[Tag],
) -> ThankYou:
    """Assemble a ThankYou from its main row and child rows."""
    return ThankYou(
        id=ThankYouId(row["id"]),
        author_id=UserId(row["author_id"]),
        description=row["description"],
        date_created=row["date_created"],
        thanked=list(thanked),
        recipient_ids=frozenset(UserId(i) for i in recipient_ids),
        tags=list(tags),
    )


def rows_to_feature_flags(
    rows: Iterable[Dict[str, Any]], defaults: FeatureFlags
) -> FeatureFlags:
    """Overlay stored flag rows on defaults; unknown names are ignored."""
    stored = {
        row["name"]: row["value"]
        for row in rows
        if row["name"] in FeatureFlags.model_fields
    }
    return FeatureFlags(**{**defaults.model_dump(), **stored})
