"""Application layer DI providers."""

from dishka import Scope, provide

from thanks.application.binder import ConfigBinder, TagBinder, ThankYouBinder
from thanks.application.usecase.auth import GetActorUseCase
from thanks.application.usecase.config import GetConfigUseCase, UpdateConfigUseCase
from thanks.application.usecase.tag import (
    CountTagsUseCase,
    CreateTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from thanks.application.usecase.thank_you import (
    CountThankYousUseCase,
    CreateThankYouUseCase,
    DeleteThankYouUseCase,
    GetThankYouUseCase,
    ListThankYousUseCase,
    UpdateThankYouUseCase,
)
from thanks.application.view import Presenter
from thanks.config import ThanksSettings
from thanks.domain.model import FeatureFlags
from thanks.domain.service import (
    Directory,
    FeatureFlagService,
    JWTService,
    TagService,
    ThankableRegistry,
    ThankableResolver,
    ThankYouGuard,
    ThankYouService,
)
from thanks.util.di.base import ProviderBase
from thanks.util.messages import Messages


class ProdApplicationProvider(ProviderBase):
    """Production application provider: binders, presenter and use cases."""

    scope = Scope.REQUEST

    # Binders and presenter
    @provide
    def get_thank_you_binder(
        self,
        flags: FeatureFlags,
        thankable_resolver: ThankableResolver,
        tag_service: TagService,
        messages: Messages,
    ) -> ThankYouBinder:
        """Provide thank-you binder with this request's feature flags."""
        return ThankYouBinder(
            flags=flags,
            thankable_resolver=thankable_resolver,
            tag_service=tag_service,
            messages=messages,
        )

    @provide
    def get_tag_binder(self, tag_service: TagService, messages: Messages) -> TagBinder:
        """Provide tag binder."""
        return TagBinder(tag_service=tag_service, messages=messages)

    @provide
    def get_config_binder(self, messages: Messages) -> ConfigBinder:
        """Provide feature flag binder."""
        return ConfigBinder(messages=messages)

    @provide
    def get_presenter(
        self,
        directory: Directory,
        registry: ThankableRegistry,
        guard: ThankYouGuard,
    ) -> Presenter:
        """Provide view presenter."""
        return Presenter(directory=directory, registry=registry, guard=guard)

    # Auth use cases
    @provide
    def get_actor_use_case(
        self, jwt_service: JWTService, directory: Directory
    ) -> GetActorUseCase:
        """Provide get actor use case."""
        return GetActorUseCase(jwt_service=jwt_service, directory=directory)

    # Thank you use cases
    @provide
    def get_create_thank_you_use_case(
        self, binder: ThankYouBinder, thank_you_service: ThankYouService
    ) -> CreateThankYouUseCase:
        """Provide create thank you use case."""
        return CreateThankYouUseCase(
            binder=binder, thank_you_service=thank_you_service
        )

    @provide
    def get_update_thank_you_use_case(
        self,
        binder: ThankYouBinder,
        thank_you_service: ThankYouService,
        guard: ThankYouGuard,
    ) -> UpdateThankYouUseCase:
        """Provide update thank you use case."""
        return UpdateThankYouUseCase(
            binder=binder, thank_you_service=thank_you_service, guard=guard
        )

    @provide
    def get_delete_thank_you_use_case(
        self, thank_you_service: ThankYouService, guard: ThankYouGuard
    ) -> DeleteThankYouUseCase:
        """Provide delete thank you use case."""
        return DeleteThankYouUseCase(thank_you_service=thank_you_service, guard=guard)

    @provide
    def get_get_thank_you_use_case(
        self, thank_you_service: ThankYouService, presenter: Presenter
    ) -> GetThankYouUseCase:
        """Provide get thank you use case."""
        return GetThankYouUseCase(
            thank_you_service=thank_you_service, presenter=presenter
        )

    @provide
    def get_list_thank_yous_use_case(
        self,
        thank_you_service: ThankYouService,
        presenter: Presenter,
        settings: ThanksSettings,
    ) -> ListThankYousUseCase:
        """Provide list thank yous use case."""
        return ListThankYousUseCase(
            thank_you_service=thank_you_service,
            presenter=presenter,
            max_page_size=settings.max_page_size,
        )

    @provide
    def get_count_thank_yous_use_case(
        self, thank_you_service: ThankYouService
    ) -> CountThankYousUseCase:
        """Provide count thank yous use case."""
        return CountThankYousUseCase(thank_you_service=thank_you_service)

    # Tag use cases
    @provide
    def get_create_tag_use_case(
        self, binder: TagBinder, tag_service: TagService, presenter: Presenter
    ) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(
            binder=binder, tag_service=tag_service, presenter=presenter
        )

    @provide
    def get_update_tag_use_case(
        self, binder: TagBinder, tag_service: TagService, presenter: Presenter
    ) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(
            binder=binder, tag_service=tag_service, presenter=presenter
        )

    @provide
    def get_get_tag_use_case(
        self, tag_service: TagService, presenter: Presenter
    ) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service, presenter=presenter)

    @provide
    def get_list_tags_use_case(
        self,
        tag_service: TagService,
        presenter: Presenter,
        settings: ThanksSettings,
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(
            tag_service=tag_service,
            presenter=presenter,
            max_page_size=settings.max_page_size,
        )

    @provide
    def get_count_tags_use_case(self, tag_service: TagService) -> CountTagsUseCase:
        """Provide count tags use case."""
        return CountTagsUseCase(tag_service=tag_service)

    # Config use cases
    @provide
    def get_get_config_use_case(
        self, feature_flag_service: FeatureFlagService
    ) -> GetConfigUseCase:
        """Provide get config use case."""
        return GetConfigUseCase(feature_flag_service=feature_flag_service)

    @provide
    def get_update_config_use_case(
        self,
        binder: ConfigBinder,
        feature_flag_service: FeatureFlagService,
        guard: ThankYouGuard,
    ) -> UpdateConfigUseCase:
        """Provide update config use case."""
        return UpdateConfigUseCase(
            binder=binder, feature_flag_service=feature_flag_service, guard=guard
        )
