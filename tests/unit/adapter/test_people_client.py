"""Unit tests for the people API directory and webhook notifier."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from thanks.adapter.error import DirectoryError
from thanks.adapter.notification import WebhookNotifier
from thanks.adapter.people import PeopleApiDirectory
from thanks.domain.error import NotificationError
from thanks.domain.model import ThankYou
from thanks.domain.value import GroupId, ThankYouId, UserId


def mock_client(status_code=200, body=None, error=None):
    """Patch httpx.AsyncClient; returns (patcher, client)."""
    patcher = patch("httpx.AsyncClient")
    client_class = patcher.start()
    client = AsyncMock()
    client_class.return_value.__aenter__.return_value = client

    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.text = "error"
    response.json.return_value = body
    if error is not None:
        client.get.side_effect = error
        client.post.side_effect = error
    else:
        client.get.return_value = response
        client.post.return_value = response
    return patcher, client


class TestPeopleApiDirectory:
    """Tests for PeopleApiDirectory."""

    @pytest.mark.asyncio
    async def test_find_users_batches_ids(self):
        patcher, client = mock_client(
            body={
                "data": [
                    {"id": 42, "name": "Grace Hopper", "profile_url": "/p/42"},
                    {"id": 43, "name": "Alan Turing"},
                ]
            }
        )
        try:
            directory = PeopleApiDirectory("https://intranet/people/v1/", "secret")

            users = await directory.find_users([UserId(43), UserId(42), UserId(43)])
        finally:
            patcher.stop()

        assert users[UserId(42)].profile_url == "/p/42"
        assert users[UserId(43)].name == "Alan Turing"
        client.get.assert_called_once_with(
            "https://intranet/people/v1/users",
            params={"ids": "42,43"},
            headers={"Authorization": "Bearer secret"},
            timeout=10.0,
        )

    @pytest.mark.asyncio
    async def test_no_ids_no_request(self):
        patcher, client = mock_client(body={"data": []})
        try:
            users = await PeopleApiDirectory("https://intranet").find_users([])
        finally:
            patcher.stop()

        assert users == {}
        client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_group_members(self):
        patcher, _ = mock_client(
            body={"data": [{"group_id": 7, "user_ids": [42, 43]}]}
        )
        try:
            members = await PeopleApiDirectory("https://intranet").find_group_members(
                [GroupId(7)]
            )
        finally:
            patcher.stop()

        assert members == {GroupId(7): {UserId(42), UserId(43)}}

    @pytest.mark.asyncio
    async def test_admin_access(self):
        patcher, client = mock_client(body={"data": {"granted": True}})
        try:
            granted = await PeopleApiDirectory("https://intranet").has_admin_access(
                UserId(1)
            )
        finally:
            patcher.stop()

        assert granted is True
        assert client.get.call_args.args[0] == (
            "https://intranet/users/1/permissions/thankyou-admin"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status_code", "body", "error"),
        [
            (503, None, None),
            (200, {"users": []}, None),
            (200, {"data": [{"id": 1}]}, None),
            (200, {"data": ["Grace Hopper"]}, None),
            (200, None, None),
            (200, None, httpx.ConnectError("refused")),
        ],
    )
    async def test_failures_raise_directory_error(self, status_code, body, error):
        patcher, _ = mock_client(status_code=status_code, body=body, error=error)
        try:
            with pytest.raises(DirectoryError):
                await PeopleApiDirectory("https://intranet").find_users([UserId(1)])
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_malformed_members_raise_directory_error(self):
        patcher, _ = mock_client(body={"data": [{"group_id": 7}]})
        try:
            with pytest.raises(DirectoryError):
                await PeopleApiDirectory("https://intranet").find_group_members(
                    [GroupId(7)]
                )
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_malformed_permission_raises_directory_error(self):
        patcher, _ = mock_client(body={"data": ["granted"]})
        try:
            with pytest.raises(DirectoryError):
                await PeopleApiDirectory("https://intranet").has_admin_access(
                    UserId(1)
                )
        finally:
            patcher.stop()


class TestWebhookNotifier:
    """Tests for WebhookNotifier."""

    @pytest.fixture
    def thank_you(self):
        return ThankYou(
            id=ThankYouId(5),
            author_id=UserId(42),
            description="Thanks",
            thanked=[{"owner_class": 3, "id": 7, "name": "Engineering"}],
            recipient_ids=frozenset({UserId(43), UserId(42)}),
        )

    @pytest.mark.asyncio
    async def test_posts_event(self, thank_you):
        patcher, client = mock_client(status_code=202)
        try:
            await WebhookNotifier("https://hooks/thanks").notify(thank_you)
        finally:
            patcher.stop()

        client.post.assert_called_once_with(
            "https://hooks/thanks",
            json={
                "event": "thank_you.created",
                "thank_you_id": 5,
                "author_id": 42,
                "recipient_ids": [42, 43],
                "description": "Thanks",
            },
            timeout=5.0,
        )

    @pytest.mark.asyncio
    async def test_without_url_nothing_is_sent(self, thank_you):
        patcher, client = mock_client()
        try:
            await WebhookNotifier(None).notify(thank_you)
        finally:
            patcher.stop()

        client.post.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status_code", "error"),
        [(500, None), (200, httpx.ReadTimeout("slow"))],
    )
    async def test_failures_raise_notification_error(
        self, thank_you, status_code, error
    ):
        patcher, _ = mock_client(status_code=status_code, error=error)
        try:
            with pytest.raises(NotificationError):
                await WebhookNotifier("https://hooks/thanks").notify(thank_you)
        finally:
            patcher.stop()
