"""PostgreSQL implementation of FeatureFlag repository."""

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thanks.domain.error import RepositoryError
from thanks.domain.model.feature_flags import FeatureFlags
from thanks.domain.repository.feature_flags import FeatureFlagRepository
from thanks.persistence.mappers import rows_to_feature_flags
from thanks.persistence.tables import feature_flags_table


class PostgresFeatureFlagRepository(FeatureFlagRepository):
    """Feature flags stored as name/value rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load(self, defaults: FeatureFlags) -> FeatureFlags:
        try:
            result = await self.session.execute(select(feature_flags_table))
        except SQLAlchemyError as e:
            logfire.error("Failed to load feature flags", error=str(e))
            raise RepositoryError(f"Failed to load feature flags: {e}")
        rows = [row._asdict() for row in result.fetchall()]
        return rows_to_feature_flags(rows, defaults)

    async def save(self, flags: FeatureFlags) -> FeatureFlags:
        rows = [
            {"name": name, "value": value} for name, value in flags.model_dump().items()
        ]
        stmt = insert(feature_flags_table).values(rows)
        stmt = stmt.on_conflict_do_update(
            index_elements=[feature_flags_table.c.name],
            set_={"value": stmt.excluded.value},
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logfire.error("Failed to save feature flags", error=str(e))
            raise RepositoryError(f"Failed to save feature flags: {e}")
        return flags
