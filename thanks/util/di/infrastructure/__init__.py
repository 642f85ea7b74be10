"""Infrastructure providers."""

# Import bases
from .notification import NotificationProvider
from .people import PeopleProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .notification import ProdNotificationProvider  # noqa: F401
from .people import ProdPeopleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "NotificationProvider",
    "PeopleProvider",
    "PersistenceProvider",
    "ProdNotificationProvider",
    "ProdPeopleProvider",
    "ProdPersistenceProvider",
]
