"""Notification clients."""

from typing import Optional

import httpx
import logfire

from thanks.domain.error import NotificationError
from thanks.domain.model.thank_you import ThankYou
from thanks.domain.service.notifier import Notifier


class WebhookNotifier(Notifier):
    """Posts a "thank you created" event to a webhook.

    The receiving service fans the event out to recipients (email, push,
    activity stream). Without a webhook URL nothing is sent.
    """

    def __init__(self, webhook_url: Optional[str], timeout: float = 5.0) -> None:
        """Initialize webhook notifier.

        Args:
            webhook_url: Event endpoint; None disables delivery
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def notify(self, thank_you: ThankYou) -> None:
        if not self.webhook_url:
            logfire.debug(
                "Notification webhook not configured", thank_you_id=thank_you.id
            )
            return

        event = {
            "event": "thank_you.created",
            "thank_you_id": thank_you.id,
            "author_id": thank_you.author_id,
            "recipient_ids": sorted(thank_you.recipient_ids),
            "description": thank_you.description,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url, json=event, timeout=self.timeout
                )

                if response.status_code >= 300:
                    logfire.error(
                        "Notification webhook rejected event",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise NotificationError(
                        f"Notification webhook returned {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Notification webhook HTTP error", error=str(e))
            raise NotificationError(f"HTTP error sending notification: {e}")


class MockNotifier(Notifier):
    """Records notifications instead of sending them.

    Set ``fail`` to make every delivery raise NotificationError.
    """

    def __init__(self) -> None:
        self.sent: list[ThankYou] = []
        self.fail = False

    async def notify(self, thank_you: ThankYou) -> None:
        if self.fail:
            raise NotificationError("Mock notification failure")
        self.sent.append(thank_you)
