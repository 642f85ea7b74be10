"""Configuration use cases."""

from .get_config import GetConfigResponse, GetConfigUseCase
from .update_config import UpdateConfigRequest, UpdateConfigUseCase

__all__ = [
    "GetConfigResponse",
    "GetConfigUseCase",
    "UpdateConfigRequest",
    "UpdateConfigUseCase",
]
