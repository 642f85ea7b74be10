"""ThankYou repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from thanks.domain.model.thank_you import ThankYou
from thanks.domain.value import ThankYouId, UserId


class ThankYouRepository(ABC):
    """Repository for ThankYou aggregate.

    Thanked entities are stored as snapshots (owner class, id, name) so a
    loaded aggregate is always valid; callers refresh them on read.
    """

    @abstractmethod
    async def save(self, thank_you: ThankYou) -> ThankYou:
        """Save a thank you (create or update) in a single transaction.

        The thank-you row, its thanked entities, recipients and tag links are
        committed together or not at all.

        Args:
            thank_you: The thank you to save

        Returns:
            The saved thank you, with its id assigned

        Raises:
            RepositoryError: If storage fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, thank_you_id: ThankYouId) -> Optional[ThankYou]:
        """Find a thank you by ID.

        Args:
            thank_you_id: The thank you's identifier

        Returns:
            The thank you if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        limit: int = 20,
        offset: int = 0,
        recipient_id: Optional[UserId] = None,
    ) -> list[ThankYou]:
        """Find thank yous, newest first.

        Args:
            limit: Maximum number of thank yous to return
            offset: Number of thank yous to skip
            recipient_id: Only thank yous received by this user

        Returns:
            List of thank yous
        """
        pass

    @abstractmethod
    async def count(self, recipient_id: Optional[UserId] = None) -> int:
        """Count thank yous, optionally only those received by a user."""
        pass

    @abstractmethod
    async def delete(self, thank_you_id: ThankYouId) -> None:
        """Delete a thank you and everything attached to it.

        Raises:
            RepositoryError: If storage fails
        """
        pass
