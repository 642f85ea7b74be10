"""In-memory implementation of ThankYou repository for testing."""

from typing import Optional

from thanks.domain.error import RepositoryError
from thanks.domain.model.thank_you import ThankYou
from thanks.domain.repository.thank_you import ThankYouRepository
from thanks.domain.value import ThankYouId, UserId


class InMemoryThankYouRepository(ThankYouRepository):
    """In-memory implementation of ThankYouRepository for testing.

    Set ``fail_writes`` to make ``save`` and ``delete`` raise RepositoryError
    without storing anything, and ``fail_reads`` to make every lookup raise.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._thank_yous: dict[ThankYouId, ThankYou] = {}
        self._next_id = 1
        self.fail_writes = False
        self.fail_reads = False

    async def save(self, thank_you: ThankYou) -> ThankYou:
        """Save a thank you (create or update)."""
        if self.fail_writes:
            raise RepositoryError("Simulated storage failure")

        if thank_you.id is None:
            thank_you = thank_you.with_id(ThankYouId(self._next_id))
            self._next_id += 1
        elif thank_you.id not in self._thank_yous:
            raise RepositoryError(f"Thank you {thank_you.id} no longer exists")

        self._thank_yous[thank_you.id] = thank_you
        return thank_you

    async def find_by_id(self, thank_you_id: ThankYouId) -> Optional[ThankYou]:
        """Find thank you by ID."""
        self._check_reads()
        return self._thank_yous.get(thank_you_id)

    async def find_recent(
        self,
        limit: int = 20,
        offset: int = 0,
        recipient_id: Optional[UserId] = None,
    ) -> list[ThankYou]:
        """Find thank yous, newest first."""
        self._check_reads()
        thank_yous = self._matching(recipient_id)
        thank_yous.sort(key=lambda t: (t.date_created, t.id), reverse=True)
        return thank_yous[offset : offset + limit]

    async def count(self, recipient_id: Optional[UserId] = None) -> int:
        """Count thank yous."""
        self._check_reads()
        return len(self._matching(recipient_id))

    async def delete(self, thank_you_id: ThankYouId) -> None:
        """Delete a thank you."""
        if self.fail_writes:
            raise RepositoryError("Simulated storage failure")
        self._thank_yous.pop(thank_you_id, None)

    def _check_reads(self) -> None:
        if self.fail_reads:
            raise RepositoryError("Simulated storage failure")

    def _matching(self, recipient_id: Optional[UserId]) -> list[ThankYou]:
        thank_yous = list(self._thank_yous.values())
        if recipient_id is not None:
            thank_yous = [t for t in thank_yous if recipient_id in t.recipient_ids]
        return thank_yous
