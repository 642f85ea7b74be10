"""Mock persistence providers for testing."""

from dishka import Scope, provide

from thanks.domain.repository import (
    FeatureFlagRepository,
    TagRepository,
    ThankYouRepository,
)
from thanks.persistence.repository.inmemory import (
    InMemoryFeatureFlagRepository,
    InMemoryTagRepository,
    InMemoryThankYouRepository,
)
from thanks.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories live as long as the container, so data written by one HTTP
    request is visible to the next. Each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_thank_you_repository(self) -> ThankYouRepository:
        """Provide in-memory thank-you repository."""
        return InMemoryThankYouRepository()

    @provide(scope=Scope.APP)
    def get_tag_repository(self) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository()

    @provide(scope=Scope.APP)
    def get_feature_flag_repository(self) -> FeatureFlagRepository:
        """Provide in-memory feature flag repository."""
        return InMemoryFeatureFlagRepository()
