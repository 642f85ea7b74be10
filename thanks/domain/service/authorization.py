"""Authorization rules for thank yous and configuration."""

from thanks.domain.model.thank_you import ThankYou
from thanks.domain.value import SecurityContext

from .base import Service


class ThankYouGuard(Service):
    """Decides who may change what.

    All checks are pure predicates over the context built for the current
    request; nothing is cached between requests.
    """

    def can_edit(self, thank_you: ThankYou, context: SecurityContext) -> bool:
        """Authors may always edit; others need admin mode and admin access."""
        if thank_you.is_author(context.user_id):
            return True
        return context.admin_mode and context.has_admin_access

    def can_delete(self, thank_you: ThankYou, context: SecurityContext) -> bool:
        """Deleting follows the same rule as editing."""
        return self.can_edit(thank_you, context)

    def can_configure(self, context: SecurityContext) -> bool:
        """Only admins may change feature flags."""
        return context.has_admin_access
