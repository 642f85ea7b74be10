"""Notification infrastructure providers."""

from dishka import Scope, provide

from thanks.adapter.notification import WebhookNotifier
from thanks.config import Settings
from thanks.domain.service import Notifier
from thanks.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notifier posting to the configured webhook."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide webhook notifier."""
        return WebhookNotifier(
            webhook_url=settings.notification.webhook_url,
            timeout=settings.notification.timeout_seconds,
        )
