"""Domain services."""

from .authorization import ThankYouGuard
from .base import Service
from .directory import Directory
from .feature_flag_service import FeatureFlagService
from .jwt_service import JWTService
from .notifier import Notifier
from .tag_service import UNSET, TagService
from .thank_you_service import ThankYouService
from .thankable import (
    GroupThankableHandler,
    ThankableHandler,
    ThankableRegistry,
    UserThankableHandler,
)
from .thankable_resolver import ThankableResolver

__all__ = [
    "Directory",
    "FeatureFlagService",
    "GroupThankableHandler",
    "JWTService",
    "Notifier",
    "Service",
    "TagService",
    "ThankYouGuard",
    "ThankYouService",
    "ThankableHandler",
    "ThankableRegistry",
    "ThankableResolver",
    "UNSET",
    "UserThankableHandler",
]
