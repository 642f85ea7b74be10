"""PostgreSQL repository implementations."""

from thanks.persistence.repository.feature_flags import PostgresFeatureFlagRepository
from thanks.persistence.repository.tag import PostgresTagRepository
from thanks.persistence.repository.thank_you import PostgresThankYouRepository

__all__ = [
    "PostgresFeatureFlagRepository",
    "PostgresTagRepository",
    "PostgresThankYouRepository",
]
