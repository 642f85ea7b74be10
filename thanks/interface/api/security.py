"""Request authentication helpers for route handlers."""

from typing import Optional

import logfire
from fastapi import status

from thanks.adapter.error import AdapterError
from thanks.application.error import AuthenticationError
from thanks.application.usecase.auth import GetActorRequest, GetActorUseCase
from thanks.domain.value import SecurityContext
from thanks.interface.error import Problem
from thanks.util.messages import Messages


async def require_actor(
    get_actor_use_case: GetActorUseCase,
    messages: Messages,
    auth_token: Optional[str],
    admin_mode: bool = False,
) -> SecurityContext:
    """Security context of the caller.

    Raises:
        Problem: 401 if the caller is not authenticated
    """
    actor = await optional_actor(get_actor_use_case, messages, auth_token, admin_mode)
    if actor is None:
        raise Problem(status.HTTP_401_UNAUTHORIZED, messages("error.unauthenticated"))
    return actor


async def optional_actor(
    get_actor_use_case: GetActorUseCase,
    messages: Messages,
    auth_token: Optional[str],
    admin_mode: bool = False,
) -> Optional[SecurityContext]:
    """Security context of the caller, or None for anonymous callers."""
    if not auth_token:
        return None

    try:
        return await get_actor_use_case.execute(
            GetActorRequest(token=auth_token, admin_mode=admin_mode)
        )
    except AuthenticationError:
        return None
    except AdapterError as e:
        logfire.error("Could not check the caller's permissions", error=str(e))
        raise Problem(
            status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server")
        )
