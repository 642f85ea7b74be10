"""User-facing message catalogue.

Error titles and violation reasons are looked up here by key so deployments
can reword or translate them without touching the binders or routes.
"""

from typing import Mapping, Optional

DEFAULT_MESSAGES: dict[str, str] = {
    # Problem titles
    "thank_you.error.create": "Failed to create Thank You",
    "thank_you.error.modify": "Failed to modify Thank You",
    "thank_you.error.delete": "Failed to delete Thank You",
    "thank_you.error.not_found": "Thank You {0} could not be found",
    "thank_you.error.no_edit_permission": (
        "You do not have permission to edit this Thank You"
    ),
    "thank_you.error.no_delete_permission": (
        "You do not have permission to delete this Thank You"
    ),
    "tag.error.create": "Failed to create Tag",
    "tag.error.modify": "Failed to modify Tag",
    "tag.error.not_found": "Tag {0} could not be found",
    "config.error.modify": "Failed to modify configuration",
    "config.error.no_permission": "You do not have permission to change configuration",
    "error.server": "An unexpected error occurred, please try again later",
    "error.unauthenticated": "You must be logged in to do this",
    "error.invalid_body": "Request body must be a JSON object",
    "error.invalid_request": "Request parameters are invalid",
    # Thank you violations
    "thanked.error.empty": "Please select at least one person or group to thank",
    "thanked.error.not_array": "Thanked must be a list",
    "thanked.error.malformed": (
        "Each thanked item must be an object with integer 'oclass' and 'id'"
    ),
    "thanked.error.not_supported": "Only the following can be thanked: {0}",
    "thanked.error.not_found": "Could not find thanked item {0}",
    "description.error.empty": "Description must not be empty",
    "description.error.not_string": "Description must be a string",
    "tags.error.disabled": "Tags are disabled",
    "tags.error.empty": "Please select at least one tag",
    "tags.error.not_array": "Tags must be a list",
    "tags.error.not_integers": "Tags must be a list of tag IDs",
    "tags.error.not_found": "Tag {0} does not exist",
    # Tag violations
    "tag.name.error.undefined": "Tag name is required",
    "tag.name.error.invalid": "Tag name is invalid",
    "tag.name.error.not_unique": "A tag with this name already exists",
    "tag.bg_colour.error.invalid": "Background colour must be a string",
    "tag.active.error.invalid": "Active must be true or false",
    # Config violations
    "config.flag.error.invalid": "{0} must be true or false",
    "config.flag.error.unknown": "Unknown setting {0}",
}


class Messages:
    """Message lookup with optional per-deployment overrides."""

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._catalogue = {**DEFAULT_MESSAGES, **(overrides or {})}

    def __call__(self, key: str, *args: object) -> str:
        """Look up a message, formatting positional arguments into it.

        Unknown keys are returned as-is.
        """
        template = self._catalogue.get(key, key)
        return template.format(*args) if args else template

    def __contains__(self, key: str) -> bool:
        return key in self._catalogue
