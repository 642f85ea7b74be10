"""In-memory repository implementations for testing."""

from .feature_flags import InMemoryFeatureFlagRepository
from .tag import InMemoryTagRepository
from .thank_you import InMemoryThankYouRepository

__all__ = [
    "InMemoryFeatureFlagRepository",
    "InMemoryTagRepository",
    "InMemoryThankYouRepository",
]
