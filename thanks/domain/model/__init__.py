"""Domain model entities."""

from thanks.domain.model.feature_flags import FeatureFlags
from thanks.domain.model.tag import Tag
from thanks.domain.model.thank_you import ThankYou
from thanks.domain.model.thankable import Thankable
from thanks.domain.model.user import Group, User

__all__ = [
    "FeatureFlags",
    "Group",
    "Tag",
    "ThankYou",
    "Thankable",
    "User",
]
