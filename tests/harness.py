"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from thanks.interface.api.app import create_app
from thanks.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a test container and yields a request-scoped
    container for resolving services.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_tag(unit_env):
            service = await unit_env.get(TagService)
            tag = await service.create(UserId(1), "Teamwork")
            assert tag.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(
    unmock: set[Component] | None = None, raise_server_exceptions: bool = True
):
    """Factory for fixtures yielding a TestClient over a test container.

    Every component is mocked unless unmocked; the container, and with it
    every in-memory repository, lives for one test. Pass
    ``raise_server_exceptions=False`` to assert on 500 responses instead of
    having unhandled errors re-raised in the test.
    """

    @pytest.fixture
    def _client():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)
        with TestClient(
            app, raise_server_exceptions=raise_server_exceptions
        ) as client:
            yield client

    return _client
