"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from thanks.domain.repository.feature_flags import FeatureFlagRepository
from thanks.domain.repository.tag import TagRepository, TagSortOrder
from thanks.domain.repository.thank_you import ThankYouRepository

__all__ = [
    "FeatureFlagRepository",
    "TagRepository",
    "TagSortOrder",
    "ThankYouRepository",
]
