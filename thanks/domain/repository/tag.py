"""Tag repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Optional

from thanks.domain.model.tag import Tag
from thanks.domain.value import TagId, TagName


class TagSortOrder(str, Enum):
    """Sort order for tag listings."""

    NAME = "name"  # Alphabetical, case-insensitive
    CREATED = "created_date"  # Newest first


class TagRepository(ABC):
    """Repository interface for Tag aggregate.

    Name uniqueness is enforced here, at the storage boundary, so that two
    concurrent writers cannot both claim the same name.
    """

    @abstractmethod
    async def add(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag without an id

        Returns:
            Saved tag with its assigned id

        Raises:
            DuplicateTagNameError: If another tag already has this name
            RepositoryError: If storage fails
        """
        pass

    @abstractmethod
    async def update(self, tag: Tag) -> Tag:
        """Update an existing tag.

        Args:
            tag: Tag with an id

        Returns:
            Saved tag

        Raises:
            DuplicateTagNameError: If a rename collides with another tag
            RepositoryError: If storage fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: Iterable[TagId]) -> dict[TagId, Tag]:
        """Find multiple tags in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Mapping of id to tag; ids that do not exist are absent
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        limit: int = 20,
        offset: int = 0,
        name: Optional[str] = None,
        order_by: TagSortOrder = TagSortOrder.NAME,
    ) -> list[Tag]:
        """Find tags with filtering and pagination.

        Args:
            limit: Maximum number of tags to return
            offset: Number of tags to skip
            name: Case-insensitive substring the name must contain
            order_by: Sort order

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def count(self, name: Optional[str] = None) -> int:
        """Count tags, optionally filtered by name substring."""
        pass
