"""ThankYou domain service."""

from datetime import datetime
from typing import Optional, Sequence

import logfire

from thanks.domain.error import NotFoundError, NotificationError
from thanks.domain.model.tag import Tag
from thanks.domain.model.thank_you import ThankYou
from thanks.domain.model.thankable import Thankable
from thanks.domain.repository.thank_you import ThankYouRepository
from thanks.domain.service.notifier import Notifier
from thanks.domain.service.thankable_resolver import ThankableResolver
from thanks.domain.value import ThankYouId, UserId

from .base import Service


class ThankYouService(Service):
    """Domain service for thank-you operations."""

    def __init__(
        self,
        thank_you_repository: ThankYouRepository,
        thankable_resolver: ThankableResolver,
        notifier: Notifier,
    ) -> None:
        """Initialize thank-you service.

        Args:
            thank_you_repository: Thank-you repository
            thankable_resolver: Resolver for thanked entities and recipients
            notifier: Notification delivery
        """
        self.thank_you_repository = thank_you_repository
        self.thankable_resolver = thankable_resolver
        self.notifier = notifier

    async def create(
        self,
        author_id: UserId,
        description: str,
        thanked: Sequence[Thankable],
        tags: Optional[Sequence[Tag]] = None,
    ) -> ThankYou:
        """Build a new, unsaved thank you.

        Args:
            author_id: Author of the thank you
            description: Message
            thanked: Resolved entities being thanked (at least one)
            tags: Optional tags

        Returns:
            Unsaved thank you with recipients computed from thanked
        """
        with logfire.span(
            "thank_you_service.create", author_id=author_id, thanked=len(thanked)
        ):
            recipients = await self.thankable_resolver.recipients(thanked)
            return ThankYou(
                author_id=author_id,
                description=description,
                date_created=datetime.now(),
                thanked=list(thanked),
                recipient_ids=frozenset(recipients),
                tags=list(tags or []),
            )

    async def set_thanked(
        self, thank_you: ThankYou, thanked: Sequence[Thankable]
    ) -> ThankYou:
        """Replace the thanked entities and recompute recipients.

        Args:
            thank_you: Thank you to change
            thanked: Resolved entities being thanked

        Returns:
            Updated (unsaved) thank you
        """
        recipients = await self.thankable_resolver.recipients(thanked)
        return thank_you.with_thanked(thanked, recipients)

    async def save(self, thank_you: ThankYou) -> ThankYou:
        """Persist a thank you.

        Raises:
            RepositoryError: If storage fails; nothing is committed
        """
        with logfire.span("thank_you_service.save", thank_you_id=thank_you.id):
            saved = await self.thank_you_repository.save(thank_you)
            logfire.info(
                "Thank you saved",
                thank_you_id=saved.id,
                thanked=len(saved.thanked),
                recipients=len(saved.recipient_ids),
            )
            return saved

    async def notify(self, thank_you: ThankYou) -> None:
        """Notify recipients of a saved thank you.

        Raises:
            NotificationError: If delivery fails; the thank you stays saved
        """
        with logfire.span("thank_you_service.notify", thank_you_id=thank_you.id):
            try:
                await self.notifier.notify(thank_you)
            except NotificationError as e:
                logfire.warn(
                    "Thank you notification failed",
                    thank_you_id=thank_you.id,
                    error=str(e),
                )
                raise
            logfire.info("Thank you notification sent", thank_you_id=thank_you.id)

    async def get(
        self, thank_you_id: ThankYouId, refresh_thanked: bool = True
    ) -> ThankYou:
        """Get a thank you by ID.

        Args:
            thank_you_id: Thank you identifier
            refresh_thanked: Re-resolve thanked entities against the directory

        Raises:
            NotFoundError: If the thank you does not exist
        """
        with logfire.span("thank_you_service.get", thank_you_id=thank_you_id):
            thank_you = await self.thank_you_repository.find_by_id(thank_you_id)
            if thank_you is None:
                logfire.warn("Thank you not found", thank_you_id=thank_you_id)
                raise NotFoundError("Thank you", thank_you_id)

            if refresh_thanked:
                [thank_you] = await self._refresh([thank_you])
            return thank_you

    async def list_recent(
        self,
        limit: int = 20,
        offset: int = 0,
        recipient_id: Optional[UserId] = None,
        refresh_thanked: bool = False,
    ) -> list[ThankYou]:
        """List thank yous, newest first.

        Args:
            limit: Maximum number of thank yous to return
            offset: Number to skip
            recipient_id: Only thank yous received by this user
            refresh_thanked: Re-resolve thanked entities (one batch for the page)
        """
        with logfire.span(
            "thank_you_service.list_recent",
            limit=limit,
            offset=offset,
            recipient_id=recipient_id,
        ):
            thank_yous = await self.thank_you_repository.find_recent(
                limit=limit, offset=offset, recipient_id=recipient_id
            )
            if refresh_thanked and thank_yous:
                thank_yous = await self._refresh(thank_yous)
            logfire.info("Thank yous listed", count=len(thank_yous))
            return thank_yous

    async def count(self, recipient_id: Optional[UserId] = None) -> int:
        """Count thank yous, optionally only those received by a user."""
        return await self.thank_you_repository.count(recipient_id=recipient_id)

    async def delete(self, thank_you: ThankYou) -> None:
        """Delete a saved thank you.

        Raises:
            RepositoryError: If storage fails
        """
        with logfire.span("thank_you_service.delete", thank_you_id=thank_you.id):
            await self.thank_you_repository.delete(thank_you.id)
            logfire.info("Thank you deleted", thank_you_id=thank_you.id)

    async def _refresh(self, thank_yous: Sequence[ThankYou]) -> list[ThankYou]:
        """Refresh thanked entities of several thank yous in one batch."""
        flat = [t for thank_you in thank_yous for t in thank_you.thanked]
        refreshed = await self.thankable_resolver.refresh(flat)

        result = []
        position = 0
        for thank_you in thank_yous:
            count = len(thank_you.thanked)
            result.append(
                thank_you.model_copy(
                    update={"thanked": refreshed[position : position + count]}
                )
            )
            position += count
        return result
