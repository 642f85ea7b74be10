"""People directory infrastructure providers."""

from dishka import Scope, provide

from thanks.adapter.people import PeopleApiDirectory
from thanks.config import Settings
from thanks.domain.service import Directory
from thanks.util.di.base import ProviderBase


class PeopleProvider(ProviderBase):
    """People directory component base."""

    __mock_component__ = "people"


class ProdPeopleProvider(PeopleProvider):
    """Production directory backed by the people API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_directory(self, settings: Settings) -> Directory:
        """Provide people API directory."""
        return PeopleApiDirectory(
            base_url=settings.people.base_url,
            api_key=settings.people.api_key,
            timeout=settings.people.timeout_seconds,
        )
