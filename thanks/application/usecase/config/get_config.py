"""Get configuration use case."""

from pydantic import BaseModel

from thanks.domain.service import FeatureFlagService


class GetConfigResponse(BaseModel):
    """Current feature flags."""

    tags_enabled: bool
    tags_mandatory: bool


class GetConfigUseCase:
    """Use case for reading feature flags."""

    def __init__(self, feature_flag_service: FeatureFlagService) -> None:
        self.feature_flag_service = feature_flag_service

    async def execute(self) -> GetConfigResponse:
        flags = await self.feature_flag_service.get_flags()
        return GetConfigResponse(**flags.model_dump())
