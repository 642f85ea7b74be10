"""Tag domain service."""

from datetime import datetime
from typing import Iterable, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from thanks.config import TagSettings
from thanks.domain.error import (
    DuplicateTagNameError,
    InvalidTagNameError,
    NotFoundError,
)
from thanks.domain.model.tag import Tag
from thanks.domain.repository.tag import TagRepository, TagSortOrder
from thanks.domain.value import TagId, TagName, UserId

from .base import Service


class _Unset:
    """Marker for optional update arguments that were not supplied."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class TagService(Service):
    """Domain service for the tag vocabulary."""

    def __init__(self, tag_repository: TagRepository, settings: TagSettings) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            settings: Tag settings (name length limit)
        """
        self.tag_repository = tag_repository
        self.settings = settings

    def validate_name(self, name: str) -> TagName:
        """Check a proposed tag name without touching storage.

        Surrounding whitespace is stripped.

        Args:
            name: Proposed name

        Returns:
            The validated tag name

        Raises:
            InvalidTagNameError: If the name is blank, too long or has
                invalid characters
        """
        stripped = name.strip()
        if not stripped:
            raise InvalidTagNameError(name, "name is empty")
        if len(stripped) > self.settings.max_name_length:
            raise InvalidTagNameError(
                name, f"name is longer than {self.settings.max_name_length} characters"
            )
        try:
            return TagName(stripped)
        except PydanticValidationError:
            raise InvalidTagNameError(
                name, "name contains invalid characters"
            ) from None

    async def create(
        self, actor_id: UserId, name: str, bg_colour: Optional[str] = None
    ) -> Tag:
        """Create a new, active tag.

        Args:
            actor_id: User creating the tag
            name: Tag name
            bg_colour: Optional background colour

        Returns:
            Saved tag

        Raises:
            InvalidTagNameError: If the name is invalid
            DuplicateTagNameError: If the name is taken
            RepositoryError: If storage fails
        """
        with logfire.span("tag_service.create", name=name, actor_id=actor_id):
            tag_name = self.validate_name(name)

            # Fast path; the repository's constraint is authoritative
            if await self.tag_repository.find_by_name(tag_name):
                logfire.warn("Tag name already taken", name=tag_name.root)
                raise DuplicateTagNameError(tag_name.root)

            now = datetime.now()
            tag = Tag(
                name=tag_name,
                active=True,
                bg_colour=bg_colour,
                created_by=actor_id,
                created_date=now,
                modified_by=actor_id,
                modified_date=now,
            )

            saved = await self.tag_repository.add(tag)
            logfire.info("Tag created", tag_id=saved.id, name=saved.name.root)
            return saved

    async def update(
        self,
        tag: Tag,
        actor_id: UserId,
        *,
        name: str | _Unset = UNSET,
        active: bool | _Unset = UNSET,
        bg_colour: Optional[str] | _Unset = UNSET,
    ) -> Tag:
        """Apply the supplied changes to a tag.

        The modification stamp is only updated when a field actually changes.

        Args:
            tag: Tag to update
            actor_id: User making the change
            name: New name
            active: New active flag
            bg_colour: New background colour (None clears it)

        Returns:
            Saved tag (unchanged tag if nothing changed)

        Raises:
            InvalidTagNameError: If the new name is invalid
            DuplicateTagNameError: If the new name belongs to another tag
            RepositoryError: If storage fails
        """
        with logfire.span("tag_service.update", tag_id=tag.id, actor_id=actor_id):
            changes: dict[str, object] = {}

            if not isinstance(name, _Unset):
                tag_name = self.validate_name(name)
                if tag_name != tag.name:
                    existing = await self.tag_repository.find_by_name(tag_name)
                    if existing and existing.id != tag.id:
                        logfire.warn("Tag rename collides", name=tag_name.root)
                        raise DuplicateTagNameError(tag_name.root)
                    changes["name"] = tag_name

            if not isinstance(active, _Unset) and active != tag.active:
                changes["active"] = active

            if not isinstance(bg_colour, _Unset) and bg_colour != tag.bg_colour:
                changes["bg_colour"] = bg_colour

            if not changes:
                logfire.info("Tag unchanged", tag_id=tag.id)
                return tag

            changes["modified_by"] = actor_id
            changes["modified_date"] = datetime.now()

            saved = await self.tag_repository.update(tag.model_copy(update=changes))
            logfire.info(
                "Tag updated",
                tag_id=saved.id,
                fields=sorted(k for k in changes if not k.startswith("modified_")),
            )
            return saved

    async def get_by_id(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.get_by_id", tag_id=tag_id):
            tag = await self.tag_repository.find_by_id(tag_id)
            if tag is None:
                logfire.warn("Tag not found", tag_id=tag_id)
                raise NotFoundError("Tag", tag_id)
            return tag

    async def get_by_ids(self, tag_ids: Iterable[TagId]) -> dict[TagId, Tag]:
        """Get tags by ID in one lookup; missing ids are simply absent."""
        ids = list(dict.fromkeys(tag_ids))
        with logfire.span("tag_service.get_by_ids", count=len(ids)):
            if not ids:
                return {}
            return await self.tag_repository.find_by_ids(ids)

    async def list_tags(
        self,
        limit: int = 20,
        offset: int = 0,
        name: Optional[str] = None,
        order_by: TagSortOrder = TagSortOrder.NAME,
    ) -> list[Tag]:
        """List tags.

        Args:
            limit: Maximum number of tags to return
            offset: Number of tags to skip
            name: Case-insensitive name substring filter
            order_by: Sort order

        Returns:
            List of tags
        """
        with logfire.span(
            "tag_service.list_tags", limit=limit, offset=offset, name=name
        ):
            tags = await self.tag_repository.find_all(
                limit=limit, offset=offset, name=name, order_by=order_by
            )
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def count(self, name: Optional[str] = None) -> int:
        """Count tags, optionally filtered by name substring."""
        return await self.tag_repository.count(name=name)
