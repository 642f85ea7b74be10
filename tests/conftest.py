"""Test configuration and fixtures."""

from typing import TypeVar

import logfire
from fastapi.testclient import TestClient

from thanks.config import Settings
from thanks.util.jwt import create_token

T = TypeVar("T")

# Keep telemetry local; instrumentation in create_app needs a configured logfire
logfire.configure(send_to_logfire=False, console=False)

# Users seeded in the mock directory
ADMIN_ID = 1  # Ada Admin, holds admin access
AUTHOR_ID = 42  # Grace Hopper, member of group 7
OTHER_ID = 43  # Alan Turing, member of group 7


def login(client: TestClient, user_id: int) -> TestClient:
    """Authenticate every following request of the client as the user."""
    client.cookies.set("auth_token", create_token(user_id, Settings().auth))
    return client


def component(client: TestClient, dependency: type[T]) -> T:
    """Resolve an app-scoped mock (repository, directory, notifier) of the client."""
    container = client.app.state.dishka_container
    return client.portal.call(container.get, dependency)
