"""Mock notification providers for testing."""

from dishka import Scope, provide

from thanks.adapter.notification import MockNotifier
from thanks.domain.service import Notifier
from thanks.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider recording deliveries in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide mock notifier."""
        return MockNotifier()
