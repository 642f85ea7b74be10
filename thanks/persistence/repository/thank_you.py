"""PostgreSQL implementation of ThankYou repository."""

from collections import defaultdict
from typing import Any, Optional, Sequence

import logfire
from sqlalchemy import Result, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thanks.domain.error import RepositoryError
from thanks.domain.model import Tag, ThankYou, Thankable
from thanks.domain.repository.thank_you import ThankYouRepository
from thanks.domain.value import ThankYouId, UserId
from thanks.persistence.mappers import (
    row_to_tag,
    row_to_thank_you,
    row_to_thankable,
    thank_you_to_dict,
    thankable_to_dict,
)
from thanks.persistence.tables import (
    tags_table,
    thank_you_tags_table,
    thank_you_thanked_table,
    thank_you_users_table,
    thank_yous_table,
)

_CHILD_TABLES = (
    thank_you_thanked_table,
    thank_you_users_table,
    thank_you_tags_table,
)


class PostgresThankYouRepository(ThankYouRepository):
    """PostgreSQL implementation of ThankYouRepository.

    ``save`` and ``delete`` commit their own transaction so callers can act
    (e.g. notify) only once the data is durable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, thank_you: ThankYou) -> ThankYou:
        """Save a thank you and its children in one transaction."""
        try:
            if thank_you.id is None:
                result = await self.session.execute(
                    insert(thank_yous_table)
                    .values(**thank_you_to_dict(thank_you))
                    .returning(thank_yous_table.c.id)
                )
                thank_you_id = ThankYouId(result.scalar_one())
            else:
                thank_you_id = thank_you.id
                result = await self.session.execute(
                    update(thank_yous_table)
                    .where(thank_yous_table.c.id == thank_you_id)
                    .values(description=thank_you.description)
                )
                if result.rowcount == 0:
                    raise RepositoryError(f"Thank you {thank_you_id} no longer exists")
                for table in _CHILD_TABLES:
                    await self.session.execute(
                        delete(table).where(table.c.thank_you_id == thank_you_id)
                    )

            await self._insert_children(thank_you, thank_you_id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.error(
                "Failed to save thank you", thank_you_id=thank_you.id, error=str(e)
            )
            raise RepositoryError(f"Failed to save thank you: {e}")
        except RepositoryError:
            await self.session.rollback()
            raise

        return thank_you.with_id(thank_you_id)

    async def _insert_children(
        self, thank_you: ThankYou, thank_you_id: ThankYouId
    ) -> None:
        thanked_rows = [
            thankable_to_dict(thankable, thank_you_id, position)
            for position, thankable in enumerate(thank_you.thanked)
        ]
        await self.session.execute(insert(thank_you_thanked_table), thanked_rows)

        if thank_you.recipient_ids:
            await self.session.execute(
                insert(thank_you_users_table),
                [
                    {"thank_you_id": thank_you_id, "user_id": user_id}
                    for user_id in sorted(thank_you.recipient_ids)
                ],
            )

        if thank_you.tags:
            await self.session.execute(
                insert(thank_you_tags_table),
                [
                    {"thank_you_id": thank_you_id, "tag_id": tag.id, "position": i}
                    for i, tag in enumerate(thank_you.tags)
                ],
            )

    async def find_by_id(self, thank_you_id: ThankYouId) -> Optional[ThankYou]:
        """Find thank you by ID."""
        stmt = select(thank_yous_table).where(thank_yous_table.c.id == thank_you_id)
        result = await self._query(stmt, thank_you_id=thank_you_id)
        row = result.fetchone()
        if row is None:
            return None
        [thank_you] = await self._hydrate([row._asdict()])
        return thank_you

    async def find_recent(
        self,
        limit: int = 20,
        offset: int = 0,
        recipient_id: Optional[UserId] = None,
    ) -> list[ThankYou]:
        """Find thank yous, newest first."""
        stmt = select(thank_yous_table)
        if recipient_id is not None:
            stmt = stmt.where(self._received_by(recipient_id))
        stmt = (
            stmt.order_by(
                thank_yous_table.c.date_created.desc(), thank_yous_table.c.id.desc()
            )
            .limit(limit)
            .offset(offset)
        )

        result = await self._query(stmt, recipient_id=recipient_id)
        rows = [row._asdict() for row in result.fetchall()]
        return await self._hydrate(rows)

    async def count(self, recipient_id: Optional[UserId] = None) -> int:
        """Count thank yous."""
        stmt = select(func.count()).select_from(thank_yous_table)
        if recipient_id is not None:
            stmt = stmt.where(self._received_by(recipient_id))
        result = await self._query(stmt, recipient_id=recipient_id)
        return result.scalar_one()

    async def delete(self, thank_you_id: ThankYouId) -> None:
        """Delete a thank you; child rows cascade."""
        try:
            await self.session.execute(
                delete(thank_yous_table).where(thank_yous_table.c.id == thank_you_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.error(
                "Failed to delete thank you", thank_you_id=thank_you_id, error=str(e)
            )
            raise RepositoryError(f"Failed to delete thank you: {e}")

    async def _query(self, stmt: Any, **context: Any) -> Result[Any]:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Failed to read thank yous", error=str(e), **context)
            raise RepositoryError(f"Failed to read thank yous: {e}")

    @staticmethod
    def _received_by(recipient_id: UserId) -> Any:
        return thank_yous_table.c.id.in_(
            select(thank_you_users_table.c.thank_you_id).where(
                thank_you_users_table.c.user_id == recipient_id
            )
        )

    async def _hydrate(self, rows: Sequence[dict[str, Any]]) -> list[ThankYou]:
        """Load children for many thank yous with one query per child table."""
        if not rows:
            return []
        ids = [row["id"] for row in rows]

        thanked: dict[int, list[Thankable]] = defaultdict(list)
        result = await self._query(
            select(thank_you_thanked_table)
            .where(thank_you_thanked_table.c.thank_you_id.in_(ids))
            .order_by(
                thank_you_thanked_table.c.thank_you_id,
                thank_you_thanked_table.c.position,
            )
        )
        for child in result.fetchall():
            child_row = child._asdict()
            thanked[child_row["thank_you_id"]].append(row_to_thankable(child_row))

        recipients: dict[int, list[int]] = defaultdict(list)
        result = await self._query(
            select(thank_you_users_table).where(
                thank_you_users_table.c.thank_you_id.in_(ids)
            )
        )
        for child in result.fetchall():
            recipients[child.thank_you_id].append(child.user_id)

        tags: dict[int, list[Tag]] = defaultdict(list)
        result = await self._query(
            select(thank_you_tags_table.c.thank_you_id, tags_table)
            .join(tags_table, tags_table.c.id == thank_you_tags_table.c.tag_id)
            .where(thank_you_tags_table.c.thank_you_id.in_(ids))
            .order_by(
                thank_you_tags_table.c.thank_you_id, thank_you_tags_table.c.position
            )
        )
        for child in result.fetchall():
            child_row = child._asdict()
            tags[child_row["thank_you_id"]].append(row_to_tag(child_row))

        return [
            row_to_thank_you(
                row, thanked[row["id"]], recipients[row["id"]], tags[row["id"]]
            )
            for row in rows
        ]
