"""Tag routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Query, status

from thanks.application.binder import Violation
from thanks.application.error import InvalidRequestError
from thanks.application.usecase.auth import GetActorUseCase
from thanks.application.usecase.tag import (
    CountTagsRequest,
    CountTagsUseCase,
    CreateTagRequest,
    CreateTagUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from thanks.application.view import TagView
from thanks.config import ThanksSettings
from thanks.domain.error import (
    DuplicateTagNameError,
    InvalidTagNameError,
    NotFoundError,
    RepositoryError,
)
from thanks.domain.repository import TagSortOrder
from thanks.interface.api.security import require_actor
from thanks.interface.error import Problem
from thanks.util.messages import Messages

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=list[TagView])
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    settings: FromDishka[ThanksSettings],
    messages: FromDishka[Messages],
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    name: Optional[str] = None,
    order_by: TagSortOrder = TagSortOrder.NAME,
) -> list[TagView]:
    """List tags.

    Example:
        GET /tags?name=team&limit=10
    """
    with logfire.span("api.list_tags", limit=limit, offset=offset, name=name):
        try:
            result = await list_tags_use_case.execute(
                ListTagsRequest(
                    limit=limit or settings.default_page_size,
                    offset=offset,
                    name=name,
                    order_by=order_by,
                )
            )
            return result.tags
        except RepositoryError as e:
            logfire.error("Storage failed listing tags", error=str(e))
            raise Problem(
                status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server")
            )


@router.get("/count", response_model=int)
async def count_tags(
    count_tags_use_case: FromDishka[CountTagsUseCase],
    messages: FromDishka[Messages],
    name: Optional[str] = None,
) -> int:
    try:
        return await count_tags_use_case.execute(CountTagsRequest(name=name))
    except RepositoryError as e:
        logfire.error("Storage failed counting tags", name=name, error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))


@router.get("/{tag_id}", response_model=TagView)
async def get_tag(
    tag_id: int,
    get_tag_use_case: FromDishka[GetTagUseCase],
    messages: FromDishka[Messages],
) -> TagView:
    try:
        return await get_tag_use_case.execute(GetTagRequest(tag_id=tag_id))
    except NotFoundError:
        raise Problem(
            status.HTTP_404_NOT_FOUND, messages("tag.error.not_found", tag_id)
        )
    except RepositoryError as e:
        logfire.error("Storage failed loading tag", tag_id=tag_id, error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))


@router.post("", response_model=TagView)
async def create_tag(
    create_tag_use_case: FromDishka[CreateTagUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    payload: dict[str, Any] = Body(...),
    auth_token: Optional[str] = Cookie(default=None),
) -> TagView:
    """Add a tag to the vocabulary.

    Body: ``{"name": "Teamwork", "bg_colour": "#ffcc00"}``
    """
    actor = await require_actor(get_actor_use_case, messages, auth_token)
    title = messages("tag.error.create")

    try:
        return await create_tag_use_case.execute(
            CreateTagRequest(actor=actor, payload=payload)
        )

    except InvalidRequestError as e:
        raise Problem(status.HTTP_400_BAD_REQUEST, title, e.violations)
    except InvalidTagNameError:
        raise Problem(
            status.HTTP_400_BAD_REQUEST,
            title,
            [Violation("name", messages("tag.name.error.invalid"))],
        )
    except DuplicateTagNameError:
        raise Problem(
            status.HTTP_400_BAD_REQUEST,
            title,
            [Violation("name", messages("tag.name.error.not_unique"))],
        )
    except RepositoryError as e:
        logfire.error("Create tag failed unexpectedly", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)


@router.patch("/{tag_id}", response_model=TagView)
async def update_tag(
    tag_id: int,
    update_tag_use_case: FromDishka[UpdateTagUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    payload: dict[str, Any] = Body(...),
    auth_token: Optional[str] = Cookie(default=None),
) -> TagView:
    """Rename, (de)activate or recolour a tag.

    Body fields are all optional: ``{"name": ..., "active": ..., "bg_colour": ...}``
    """
    actor = await require_actor(get_actor_use_case, messages, auth_token)
    title = messages("tag.error.modify")

    try:
        return await update_tag_use_case.execute(
            UpdateTagRequest(tag_id=tag_id, actor=actor, payload=payload)
        )

    except InvalidRequestError as e:
        raise Problem(status.HTTP_400_BAD_REQUEST, title, e.violations)
    except NotFoundError:
        raise Problem(
            status.HTTP_404_NOT_FOUND, messages("tag.error.not_found", tag_id)
        )
    except InvalidTagNameError:
        raise Problem(
            status.HTTP_400_BAD_REQUEST,
            title,
            [Violation("name", messages("tag.name.error.invalid"))],
        )
    except DuplicateTagNameError:
        raise Problem(
            status.HTTP_400_BAD_REQUEST,
            title,
            [Violation("name", messages("tag.name.error.not_unique"))],
        )
    except RepositoryError as e:
        logfire.error("Update tag failed unexpectedly", tag_id=tag_id, error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)
