"""In-memory implementation of FeatureFlag repository for testing."""

from typing import Optional

from thanks.domain.error import RepositoryError
from thanks.domain.model.feature_flags import FeatureFlags
from thanks.domain.repository.feature_flags import FeatureFlagRepository


class InMemoryFeatureFlagRepository(FeatureFlagRepository):
    """Holds the flags in memory; nothing is stored until the first save.

    Set ``fail_reads`` to make ``load`` raise RepositoryError.
    """

    def __init__(self) -> None:
        self._flags: Optional[FeatureFlags] = None
        self.fail_reads = False

    async def load(self, defaults: FeatureFlags) -> FeatureFlags:
        if self.fail_reads:
            raise RepositoryError("Simulated storage failure")
        return self._flags if self._flags is not None else defaults

    async def save(self, flags: FeatureFlags) -> FeatureFlags:
        self._flags = flags
        return flags
