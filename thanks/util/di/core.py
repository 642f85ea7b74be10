"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from thanks.config import AuthSettings, Settings, TagSettings, ThanksSettings
from thanks.util.di.base import ProviderBase
from thanks.util.messages import Messages


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_tag_settings(self, settings: Settings) -> TagSettings:
        """Provide tag settings."""
        return settings.tags

    @provide(scope=Scope.APP)
    def provide_thanks_settings(self, settings: Settings) -> ThanksSettings:
        """Provide thank-you settings."""
        return settings.thanks

    @provide(scope=Scope.APP)
    def provide_messages(self) -> Messages:
        """Provide the message catalogue."""
        return Messages()
