"""Notifier interface: tells recipients they have been thanked."""

from abc import ABC, abstractmethod

from thanks.domain.model.thank_you import ThankYou


class Notifier(ABC):
    """Delivers notifications about saved thank yous."""

    @abstractmethod
    async def notify(self, thank_you: ThankYou) -> None:
        """Notify the recipients of a saved thank you.

        Raises:
            NotificationError: If delivery fails
        """
        pass
