"""Interface layer errors."""

from typing import Optional, Sequence

from thanks.application.binder import Violation


class InterfaceError(Exception):
    """Base interface error."""

    pass


class Problem(InterfaceError):
    """An HTTP error answered with an RFC 7807 problem body.

    Raised by route handlers; rendered by the app's problem handler.
    """

    def __init__(
        self,
        status: int,
        title: str,
        violations: Optional[Sequence[Violation]] = None,
    ):
        self.status = status
        self.title = title
        self.violations = list(violations or [])
        super().__init__(f"{status} {title}")
