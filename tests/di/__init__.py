"""Mock providers for testing."""

from .container import build_test_container
from .notification import MockNotificationProvider
from .people import MockPeopleProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockNotificationProvider",
    "MockPeopleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
