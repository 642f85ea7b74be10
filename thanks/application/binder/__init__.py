"""Request binders: untrusted payloads to typed commands."""

from .common import MISSING, BindResult, Violation, coerce_int, coerce_str
from .config import ConfigBinder, UpdateConfigCommand
from .tag import CreateTagCommand, TagBinder, UpdateTagCommand
from .thank_you import (
    CreateThankYouCommand,
    ThankYouBinder,
    UpdateThankYouCommand,
)

__all__ = [
    "BindResult",
    "ConfigBinder",
    "CreateTagCommand",
    "CreateThankYouCommand",
    "MISSING",
    "TagBinder",
    "ThankYouBinder",
    "UpdateConfigCommand",
    "UpdateTagCommand",
    "UpdateThankYouCommand",
    "Violation",
    "coerce_int",
    "coerce_str",
]
