"""Thank you use cases."""

from .create_thank_you import (
    CreateThankYouRequest,
    CreateThankYouResponse,
    CreateThankYouUseCase,
)
from .delete_thank_you import DeleteThankYouRequest, DeleteThankYouUseCase
from .get_thank_you import GetThankYouRequest, GetThankYouUseCase
from .list_thank_yous import (
    CountThankYousRequest,
    CountThankYousUseCase,
    ListThankYousRequest,
    ListThankYousResponse,
    ListThankYousUseCase,
)
from .update_thank_you import (
    UpdateThankYouRequest,
    UpdateThankYouResponse,
    UpdateThankYouUseCase,
)

__all__ = [
    "CountThankYousRequest",
    "CountThankYousUseCase",
    "CreateThankYouRequest",
    "CreateThankYouResponse",
    "CreateThankYouUseCase",
    "DeleteThankYouRequest",
    "DeleteThankYouUseCase",
    "GetThankYouRequest",
    "GetThankYouUseCase",
    "ListThankYousRequest",
    "ListThankYousResponse",
    "ListThankYousUseCase",
    "UpdateThankYouRequest",
    "UpdateThankYouResponse",
    "UpdateThankYouUseCase",
]
