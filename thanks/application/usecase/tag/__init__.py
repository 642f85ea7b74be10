"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .get_tag import GetTagRequest, GetTagUseCase
from .list_tags import (
    CountTagsRequest,
    CountTagsUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from .update_tag import UpdateTagRequest, UpdateTagUseCase

__all__ = [
    "CountTagsRequest",
    "CountTagsUseCase",
    "CreateTagRequest",
    "CreateTagUseCase",
    "GetTagRequest",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "UpdateTagRequest",
    "UpdateTagUseCase",
]
