"""Feature flag routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, status

from thanks.application.error import InvalidRequestError
from thanks.application.usecase.auth import GetActorUseCase
from thanks.application.usecase.config import (
    GetConfigResponse,
    GetConfigUseCase,
    UpdateConfigRequest,
    UpdateConfigUseCase,
)
from thanks.domain.error import ForbiddenError, RepositoryError
from thanks.interface.api.security import require_actor
from thanks.interface.error import Problem
from thanks.util.messages import Messages

router = APIRouter(prefix="/config", tags=["config"], route_class=DishkaRoute)


@router.get("", response_model=GetConfigResponse)
async def get_config(
    get_config_use_case: FromDishka[GetConfigUseCase],
    messages: FromDishka[Messages],
) -> GetConfigResponse:
    """Current tag feature flags."""
    try:
        return await get_config_use_case.execute()
    except RepositoryError as e:
        logfire.error("Storage failed loading feature flags", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))


@router.patch("", response_model=bool)
async def update_config(
    update_config_use_case: FromDishka[UpdateConfigUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    payload: dict[str, Any] = Body(...),
    auth_token: Optional[str] = Cookie(default=None),
) -> bool:
    """Change feature flags. Admins only.

    Body: ``{"tags_enabled": true, "tags_mandatory": false}``
    """
    actor = await require_actor(get_actor_use_case, messages, auth_token)
    title = messages("config.error.modify")

    try:
        await update_config_use_case.execute(
            UpdateConfigRequest(actor=actor, payload=payload)
        )
        return True

    except ForbiddenError:
        raise Problem(
            status.HTTP_401_UNAUTHORIZED, messages("config.error.no_permission")
        )
    except InvalidRequestError as e:
        raise Problem(status.HTTP_400_BAD_REQUEST, title, e.violations)
    except RepositoryError as e:
        logfire.error("Update config failed unexpectedly", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)
