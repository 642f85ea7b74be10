"""Response views for thank yous and tags.

Views are what the API returns. User display names are looked up in one
batched directory call per presentation, never per item.
"""

from datetime import datetime
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel

from thanks.domain.model import Tag, ThankYou, Thankable
from thanks.domain.service import Directory, ThankableRegistry, ThankYouGuard
from thanks.domain.value import SecurityContext, UserId


class ObjectTypeView(BaseModel):
    """Owner class of a thanked entity."""

    id: int
    name: Optional[str]


class ThankableView(BaseModel):
    """A thanked entity."""

    id: int
    extranet_area_id: Optional[int]
    name: str
    profile_url: Optional[str]
    image_url: Optional[str]
    object_type: ObjectTypeView


class UserView(BaseModel):
    """A user reference with display name."""

    id: int
    name: Optional[str]


class TagView(BaseModel):
    """A tag, with creator and modifier display names."""

    id: int
    active: bool
    name: str
    created_by: Optional[str]
    created_date: datetime
    modified_by: Optional[str]
    modified_date: datetime
    bg_colour: Optional[str]


class ThankYouView(BaseModel):
    """A thank you as shown to a particular viewer."""

    id: int
    author: UserView
    date_created: datetime
    description: str
    thanked: Optional[list[ThankableView]]
    users: list[UserView]
    tags: list[TagView]
    can_edit: bool
    can_delete: bool


class Presenter:
    """Turns domain objects into views."""

    def __init__(
        self,
        directory: Directory,
        registry: ThankableRegistry,
        guard: ThankYouGuard,
    ) -> None:
        self.directory = directory
        self.registry = registry
        self.guard = guard

    async def thank_yous(
        self,
        thank_yous: Sequence[ThankYou],
        context: Optional[SecurityContext] = None,
        include_thanked: bool = True,
    ) -> list[ThankYouView]:
        """Present thank yous.

        Args:
            thank_yous: Saved thank yous
            context: Viewer; without one, nothing is editable
            include_thanked: Include the thanked entities
        """
        user_ids: set[UserId] = set()
        for thank_you in thank_yous:
            user_ids.add(thank_you.author_id)
            user_ids |= thank_you.recipient_ids
            for tag in thank_you.tags:
                user_ids.update((tag.created_by, tag.modified_by))
        names = await self._names(user_ids)

        return [
            ThankYouView(
                id=thank_you.id,
                author=UserView(
                    id=thank_you.author_id, name=names.get(thank_you.author_id)
                ),
                date_created=thank_you.date_created,
                description=thank_you.description,
                thanked=(
                    [self._thankable(t) for t in thank_you.thanked]
                    if include_thanked
                    else None
                ),
                users=[
                    UserView(id=user_id, name=names.get(user_id))
                    for user_id in sorted(thank_you.recipient_ids)
                ],
                tags=[self._tag(tag, names) for tag in thank_you.tags],
                can_edit=context is not None
                and self.guard.can_edit(thank_you, context),
                can_delete=context is not None
                and self.guard.can_delete(thank_you, context),
            )
            for thank_you in thank_yous
        ]

    async def tags(self, tags: Sequence[Tag]) -> list[TagView]:
        """Present tags."""
        user_ids = {
            user_id for tag in tags for user_id in (tag.created_by, tag.modified_by)
        }
        names = await self._names(user_ids)
        return [self._tag(tag, names) for tag in tags]

    def _thankable(self, thankable: Thankable) -> ThankableView:
        return ThankableView(
            id=thankable.id,
            extranet_area_id=thankable.extranet_area_id,
            name=thankable.name,
            profile_url=thankable.profile_url,
            image_url=thankable.image_url,
            object_type=ObjectTypeView(
                id=thankable.owner_class,
                name=self.registry.name_for_class_id(thankable.owner_class),
            ),
        )

    @staticmethod
    def _tag(tag: Tag, names: dict[UserId, str]) -> TagView:
        return TagView(
            id=tag.id,
            active=tag.active,
            name=tag.name.root,
            created_by=names.get(tag.created_by),
            created_date=tag.created_date,
            modified_by=names.get(tag.modified_by),
            modified_date=tag.modified_date,
            bg_colour=tag.bg_colour,
        )

    async def _names(self, user_ids: Iterable[UserId]) -> dict[UserId, str]:
        ids = list(user_ids)
        if not ids:
            return {}
        users = await self.directory.find_users(ids)
        return {user_id: user.name for user_id, user in users.items()}
