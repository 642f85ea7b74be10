"""Mock people directory providers for testing."""

from dishka import Scope, provide

from thanks.adapter.people import MockDirectory
from thanks.domain.service import Directory
from thanks.util.di.infrastructure.people import PeopleProvider


class MockPeopleProvider(PeopleProvider):
    """Mock people provider using the seeded in-memory directory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_directory(self) -> Directory:
        """Provide mock directory."""
        return MockDirectory()
