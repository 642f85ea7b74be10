"""Application layer errors."""

from typing import Sequence

from thanks.application.binder.common import Violation


class ApplicationError(Exception):
    """Base application error."""

    pass


class InvalidRequestError(ApplicationError):
    """Raised when a request payload has field violations.

    Nothing has been written when this is raised.
    """

    def __init__(self, violations: Sequence[Violation]):
        self.violations = list(violations)
        super().__init__(
            "Invalid request: " + ", ".join(v.name for v in self.violations)
        )


class AuthenticationError(ApplicationError):
    """Raised when a request carries no valid authentication."""

    pass
