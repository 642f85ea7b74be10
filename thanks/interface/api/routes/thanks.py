"""Thank you routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Query, status

from thanks.adapter.error import AdapterError
from thanks.application.error import InvalidRequestError
from thanks.application.usecase.auth import GetActorUseCase
from thanks.application.usecase.thank_you import (
    CountThankYousRequest,
    CountThankYousUseCase,
    CreateThankYouRequest,
    CreateThankYouUseCase,
    DeleteThankYouRequest,
    DeleteThankYouUseCase,
    GetThankYouRequest,
    GetThankYouUseCase,
    ListThankYousRequest,
    ListThankYousUseCase,
    UpdateThankYouRequest,
    UpdateThankYouUseCase,
)
from thanks.application.view import ThankYouView
from thanks.config import ThanksSettings
from thanks.domain.error import ForbiddenError, NotFoundError, RepositoryError
from thanks.interface.api.security import optional_actor, require_actor
from thanks.interface.error import Problem
from thanks.util.messages import Messages

router = APIRouter(prefix="/thanks", tags=["thanks"], route_class=DishkaRoute)


@router.get("", response_model=list[ThankYouView])
async def list_thank_yous(
    list_thank_yous_use_case: FromDishka[ListThankYousUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    settings: FromDishka[ThanksSettings],
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    thanked: bool = False,
    user: Optional[int] = None,
    admin_mode: bool = False,
    auth_token: Optional[str] = Cookie(default=None),
) -> list[ThankYouView]:
    """List recent thank yous, newest first.

    Args:
        limit: Page size (defaults to the configured page size)
        offset: Number of thank yous to skip
        thanked: Include the thanked entities
        user: Only thank yous received by this user
        admin_mode: Evaluate edit/delete rights in admin mode
    """
    viewer = await optional_actor(
        get_actor_use_case, messages, auth_token, admin_mode
    )

    try:
        result = await list_thank_yous_use_case.execute(
            ListThankYousRequest(
                limit=limit or settings.default_page_size,
                offset=offset,
                include_thanked=thanked,
                recipient_id=user,
                viewer=viewer,
            )
        )
        return result.thank_yous

    except AdapterError as e:
        logfire.error("Directory lookup failed listing thank yous", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))
    except RepositoryError as e:
        logfire.error("Storage failed listing thank yous", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))


@router.get("/count", response_model=int)
async def count_thank_yous(
    count_thank_yous_use_case: FromDishka[CountThankYousUseCase],
    messages: FromDishka[Messages],
    user: Optional[int] = None,
) -> int:
    """Count thank yous, optionally only those received by a user."""
    try:
        return await count_thank_yous_use_case.execute(
            CountThankYousRequest(recipient_id=user)
        )
    except RepositoryError as e:
        logfire.error("Storage failed counting thank yous", user=user, error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))


@router.get("/{thank_you_id}", response_model=ThankYouView)
async def get_thank_you(
    thank_you_id: int,
    get_thank_you_use_case: FromDishka[GetThankYouUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    admin_mode: bool = False,
    auth_token: Optional[str] = Cookie(default=None),
) -> ThankYouView:
    """Get a thank you with its thanked entities refreshed."""
    viewer = await optional_actor(
        get_actor_use_case, messages, auth_token, admin_mode
    )

    try:
        return await get_thank_you_use_case.execute(
            GetThankYouRequest(thank_you_id=thank_you_id, viewer=viewer)
        )

    except NotFoundError:
        raise Problem(
            status.HTTP_404_NOT_FOUND,
            messages("thank_you.error.not_found", thank_you_id),
        )
    except AdapterError as e:
        logfire.error(
            "Directory lookup failed", thank_you_id=thank_you_id, error=str(e)
        )
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))
    except RepositoryError as e:
        logfire.error(
            "Storage failed loading thank you", thank_you_id=thank_you_id, error=str(e)
        )
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server"))


@router.post("", response_model=bool)
async def create_thank_you(
    create_thank_you_use_case: FromDishka[CreateThankYouUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    payload: dict[str, Any] = Body(...),
    auth_token: Optional[str] = Cookie(default=None),
) -> bool:
    """Thank one or more people or groups.

    Body: ``{"thanked": [{"oclass": 1, "id": 42}], "description": "...",
    "tags": [1, 2]}``. A failure to notify recipients is logged; the thank
    you is still created.
    """
    actor = await require_actor(get_actor_use_case, messages, auth_token)
    title = messages("thank_you.error.create")

    try:
        await create_thank_you_use_case.execute(
            CreateThankYouRequest(actor=actor, payload=payload)
        )
        return True

    except InvalidRequestError as e:
        raise Problem(status.HTTP_400_BAD_REQUEST, title, e.violations)
    except RepositoryError as e:
        logfire.error("Create thank you failed unexpectedly", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)
    except AdapterError as e:
        logfire.error("Directory lookup failed creating thank you", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)


@router.patch("/{thank_you_id}", response_model=bool)
async def update_thank_you(
    thank_you_id: int,
    update_thank_you_use_case: FromDishka[UpdateThankYouUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    payload: dict[str, Any] = Body(...),
    admin_mode: bool = False,
    auth_token: Optional[str] = Cookie(default=None),
) -> bool:
    """Change a thank you's description, thanked entities or tags.

    Every body field is optional; absent fields are left unchanged.
    """
    actor = await require_actor(get_actor_use_case, messages, auth_token, admin_mode)
    title = messages("thank_you.error.modify")

    try:
        await update_thank_you_use_case.execute(
            UpdateThankYouRequest(
                thank_you_id=thank_you_id, actor=actor, payload=payload
            )
        )
        return True

    except InvalidRequestError as e:
        raise Problem(status.HTTP_400_BAD_REQUEST, title, e.violations)
    except NotFoundError:
        raise Problem(
            status.HTTP_404_NOT_FOUND,
            messages("thank_you.error.not_found", thank_you_id),
        )
    except ForbiddenError:
        raise Problem(
            status.HTTP_401_UNAUTHORIZED,
            messages("thank_you.error.no_edit_permission"),
        )
    except RepositoryError as e:
        logfire.error(
            "Update thank you failed unexpectedly",
            thank_you_id=thank_you_id,
            error=str(e),
        )
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)
    except AdapterError as e:
        logfire.error("Directory lookup failed updating thank you", error=str(e))
        raise Problem(status.HTTP_500_INTERNAL_SERVER_ERROR, title)


@router.delete("/{thank_you_id}", response_model=bool)
async def delete_thank_you(
    thank_you_id: int,
    delete_thank_you_use_case: FromDishka[DeleteThankYouUseCase],
    get_actor_use_case: FromDishka[GetActorUseCase],
    messages: FromDishka[Messages],
    admin_mode: bool = False,
    auth_token: Optional[str] = Cookie(default=None),
) -> bool:
    """Delete a thank you (author, or admin in admin mode)."""
    actor = await require_actor(get_actor_use_case, messages, auth_token, admin_mode)

    try:
        await delete_thank_you_use_case.execute(
            DeleteThankYouRequest(thank_you_id=thank_you_id, actor=actor)
        )
        return True

    except NotFoundError:
        raise Problem(
            status.HTTP_404_NOT_FOUND,
            messages("thank_you.error.not_found", thank_you_id),
        )
    except ForbiddenError:
        raise Problem(
            status.HTTP_401_UNAUTHORIZED,
            messages("thank_you.error.no_delete_permission"),
        )
    except RepositoryError as e:
        logfire.error(
            "Delete thank you failed unexpectedly",
            thank_you_id=thank_you_id,
            error=str(e),
        )
        raise Problem(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            messages("thank_you.error.delete"),
        )
