"""Dependency injection module."""

from typing import Type

from thanks.util.di.application import ProdApplicationProvider
from thanks.util.di.base import Component, ProviderBase
from thanks.util.di.core import ProdConfigProvider
from thanks.util.di.domain import ProdDomainProvider
from thanks.util.di.infrastructure import (
    NotificationProvider,
    PeopleProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPeopleProvider,
    ProdPersistenceProvider,
)

# Core providers first, then the mockable infrastructure components
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    PeopleProvider,
    NotificationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    A base without subclasses is a concrete provider and is returned as is.
    A base with subclasses is a mockable component; the subclass whose
    ``__is_mock__`` matches ``use_mock`` is returned.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(
        f"{component} has no {'mock' if use_mock else 'production'} provider"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "NotificationProvider",
    "PeopleProvider",
    "PersistenceProvider",
    "ProdNotificationProvider",
    "ProdPeopleProvider",
    "ProdPersistenceProvider",
]
