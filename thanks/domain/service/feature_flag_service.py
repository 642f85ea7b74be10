"""Feature flag domain service."""

import logfire

from thanks.config import TagSettings
from thanks.domain.model.feature_flags import FeatureFlags
from thanks.domain.repository.feature_flags import FeatureFlagRepository

from .base import Service


class FeatureFlagService(Service):
    """Reads and writes the runtime feature flags."""

    def __init__(
        self, feature_flag_repository: FeatureFlagRepository, settings: TagSettings
    ) -> None:
        """Initialize feature flag service.

        Args:
            feature_flag_repository: Flag storage
            settings: Tag settings providing the defaults
        """
        self.feature_flag_repository = feature_flag_repository
        self.defaults = FeatureFlags(
            tags_enabled=settings.enabled, tags_mandatory=settings.mandatory
        )

    async def get_flags(self) -> FeatureFlags:
        """Current flags, with configured defaults for unset ones."""
        return await self.feature_flag_repository.load(self.defaults)

    async def update_flags(self, **changes: bool) -> FeatureFlags:
        """Change some flags and store the result.

        Args:
            **changes: Flag name to new value

        Returns:
            The stored flags
        """
        with logfire.span("feature_flag_service.update_flags", changes=changes):
            current = await self.get_flags()
            updated = current.model_copy(update=changes)
            saved = await self.feature_flag_repository.save(updated)
            logfire.info("Feature flags updated", **saved.model_dump())
            return saved
