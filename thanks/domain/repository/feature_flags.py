"""Feature flag repository interface."""

from abc import ABC, abstractmethod

from thanks.domain.model.feature_flags import FeatureFlags


class FeatureFlagRepository(ABC):
    """Persistent store for feature flags."""

    @abstractmethod
    async def load(self, defaults: FeatureFlags) -> FeatureFlags:
        """Load stored flags, falling back to ``defaults`` for unset ones."""
        pass

    @abstractmethod
    async def save(self, flags: FeatureFlags) -> FeatureFlags:
        """Store all flags.

        Raises:
            RepositoryError: If storage fails
        """
        pass
