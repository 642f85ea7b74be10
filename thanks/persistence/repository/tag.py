"""PostgreSQL implementation of Tag repository."""

from typing import Any, Iterable, Optional

import logfire
from sqlalchemy import Result, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thanks.domain.error import DuplicateTagNameError, RepositoryError
from thanks.domain.model.tag import Tag
from thanks.domain.repository.tag import TagRepository, TagSortOrder
from thanks.domain.value import TagId, TagName
from thanks.persistence.mappers import row_to_tag, tag_to_dict
from thanks.persistence.tables import tags_table


def _name_filter(name: str):
    """Case-insensitive substring match on tag name."""
    escaped = name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return tags_table.c.name.ilike(f"%{escaped}%", escape="\\")


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository.

    Name uniqueness rests on the unique index over ``lower(name)``; a
    violation surfaces as DuplicateTagNameError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def add(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag)).returning(tags_table.c.id)
        tag_id = await self._write(stmt, tag)
        return tag.model_copy(update={"id": TagId(tag_id)})

    async def update(self, tag: Tag) -> Tag:
        """Update an existing tag."""
        stmt = (
            update(tags_table)
            .where(tags_table.c.id == tag.id)
            .values(**tag_to_dict(tag))
            .returning(tags_table.c.id)
        )
        await self._write(stmt, tag)
        return tag

    async def _write(self, stmt, tag: Tag) -> int:
        try:
            result = await self.session.execute(stmt)
            tag_id = result.scalar_one()
            await self.session.commit()
            return tag_id
        except IntegrityError:
            await self.session.rollback()
            logfire.warn("Tag name unique index violated", name=tag.name.root)
            raise DuplicateTagNameError(tag.name.root)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.error("Failed to write tag", tag_id=tag.id, error=str(e))
            raise RepositoryError(f"Failed to write tag: {e}")

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self._query(stmt, tag_id=tag_id)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: Iterable[TagId]) -> dict[TagId, Tag]:
        """Find multiple tags by ID in a single query."""
        ids = list(tag_ids)
        if not ids:
            return {}

        stmt = select(tags_table).where(tags_table.c.id.in_(ids))
        result = await self._query(stmt, tag_ids=ids)
        tags = [row_to_tag(row._asdict()) for row in result.fetchall()]
        return {tag.id: tag for tag in tags}

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name, ignoring case."""
        stmt = select(tags_table).where(
            func.lower(tags_table.c.name) == func.lower(name.root)
        )
        result = await self._query(stmt, name=name.root)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_all(
        self,
        limit: int = 20,
        offset: int = 0,
        name: Optional[str] = None,
        order_by: TagSortOrder = TagSortOrder.NAME,
    ) -> list[Tag]:
        """Find tags with filtering and pagination."""
        stmt = select(tags_table)
        if name:
            stmt = stmt.where(_name_filter(name))

        # Order by requested field
        if order_by == TagSortOrder.CREATED:
            stmt = stmt.order_by(tags_table.c.created_date.desc(), tags_table.c.id)
        else:
            stmt = stmt.order_by(func.lower(tags_table.c.name), tags_table.c.id)

        result = await self._query(stmt.limit(limit).offset(offset), name=name)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def count(self, name: Optional[str] = None) -> int:
        """Count tags, optionally filtered by name substring."""
        stmt = select(func.count()).select_from(tags_table)
        if name:
            stmt = stmt.where(_name_filter(name))
        result = await self._query(stmt, name=name)
        return result.scalar_one()

    async def _query(self, stmt: Any, **context: Any) -> Result[Any]:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Failed to read tags", error=str(e), **context)
            raise RepositoryError(f"Failed to read tags: {e}")
