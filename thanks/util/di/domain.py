"""Domain layer DI providers."""

from dishka import Scope, provide

from thanks.config import AuthSettings, TagSettings
from thanks.domain.model import FeatureFlags
from thanks.domain.repository import (
    FeatureFlagRepository,
    TagRepository,
    ThankYouRepository,
)
from thanks.domain.service import (
    Directory,
    FeatureFlagService,
    GroupThankableHandler,
    JWTService,
    Notifier,
    TagService,
    ThankableRegistry,
    ThankableResolver,
    ThankYouGuard,
    ThankYouService,
    UserThankableHandler,
)
from thanks.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The thankable registry is built once per app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_thankable_registry(self, directory: Directory) -> ThankableRegistry:
        """Provide the registry of thankable owner classes."""
        return ThankableRegistry(
            [UserThankableHandler(directory), GroupThankableHandler(directory)]
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_thankable_resolver(
        self, registry: ThankableRegistry
    ) -> ThankableResolver:
        """Provide thankable resolver."""
        return ThankableResolver(registry=registry)

    @provide
    def get_guard(self) -> ThankYouGuard:
        """Provide authorization rules."""
        return ThankYouGuard()

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, settings: TagSettings
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository, settings=settings)

    @provide
    def get_thank_you_service(
        self,
        thank_you_repository: ThankYouRepository,
        thankable_resolver: ThankableResolver,
        notifier: Notifier,
    ) -> ThankYouService:
        """Provide thank-you domain service."""
        return ThankYouService(
            thank_you_repository=thank_you_repository,
            thankable_resolver=thankable_resolver,
            notifier=notifier,
        )

    @provide
    def get_feature_flag_service(
        self, feature_flag_repository: FeatureFlagRepository, settings: TagSettings
    ) -> FeatureFlagService:
        """Provide feature flag domain service."""
        return FeatureFlagService(
            feature_flag_repository=feature_flag_repository, settings=settings
        )

    @provide
    async def get_feature_flags(
        self, feature_flag_service: FeatureFlagService
    ) -> FeatureFlags:
        """Provide the feature flags in force for this request."""
        return await feature_flag_service.get_flags()
