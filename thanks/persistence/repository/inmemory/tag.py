"""In-memory implementation of Tag repository for testing."""

import asyncio
from typing import Iterable, Optional

from thanks.domain.error import DuplicateTagNameError, RepositoryError
from thanks.domain.model.tag import Tag
from thanks.domain.repository.tag import TagRepository, TagSortOrder
from thanks.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Check-and-write on the name index happens under a lock, standing in for
    the unique index of the real table. Set ``fail_reads`` to make lookups
    by id and listings raise RepositoryError.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
        self.fail_reads = False

    async def add(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        async with self._lock:
            self._claim_name(tag.name, None)
            saved = tag.model_copy(update={"id": TagId(self._next_id)})
            self._next_id += 1
            self._tags[saved.id] = saved
            self._name_index[saved.name.normalized()] = saved.id
            return saved

    async def update(self, tag: Tag) -> Tag:
        """Update an existing tag."""
        async with self._lock:
            self._claim_name(tag.name, tag.id)
            previous = self._tags[tag.id]
            self._name_index.pop(previous.name.normalized(), None)
            self._tags[tag.id] = tag
            self._name_index[tag.name.normalized()] = tag.id
            return tag

    def _claim_name(self, name: TagName, tag_id: Optional[TagId]) -> None:
        owner = self._name_index.get(name.normalized())
        if owner is not None and owner != tag_id:
            raise DuplicateTagNameError(name.root)

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        self._check_reads()
        return self._tags.get(tag_id)

    async def find_by_ids(self, tag_ids: Iterable[TagId]) -> dict[TagId, Tag]:
        """Find multiple tags by ID."""
        return {i: self._tags[i] for i in tag_ids if i in self._tags}

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case."""
        tag_id = self._name_index.get(name.normalized())
        return self._tags.get(tag_id) if tag_id is not None else None

    async def find_all(
        self,
        limit: int = 20,
        offset: int = 0,
        name: Optional[str] = None,
        order_by: TagSortOrder = TagSortOrder.NAME,
    ) -> list[Tag]:
        """Find tags with filtering and pagination."""
        tags = self._matching(name)

        # Sort by requested field
        if order_by == TagSortOrder.CREATED:
            tags.sort(key=lambda t: (t.created_date, -t.id), reverse=True)
        else:
            tags.sort(key=lambda t: (t.name.normalized(), t.id))

        return tags[offset : offset + limit]

    async def count(self, name: Optional[str] = None) -> int:
        """Count tags, optionally filtered by name substring."""
        return len(self._matching(name))

    def _check_reads(self) -> None:
        if self.fail_reads:
            raise RepositoryError("Simulated storage failure")

    def _matching(self, name: Optional[str]) -> list[Tag]:
        self._check_reads()
        tags = list(self._tags.values())
        if name:
            needle = name.casefold()
            tags = [t for t in tags if needle in t.name.normalized()]
        return tags
