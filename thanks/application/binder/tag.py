"""Tag request binder."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from thanks.application.binder.common import BindResult, Violation
from thanks.domain.error import InvalidTagNameError
from thanks.domain.service import TagService
from thanks.domain.value import TagName
from thanks.util.messages import Messages


class CreateTagCommand(BaseModel):
    """Validated input for creating a tag."""

    name: TagName
    bg_colour: Optional[str] = None


class UpdateTagCommand(BaseModel):
    """Validated input for updating a tag.

    Only fields in ``model_fields_set`` were supplied; a supplied
    ``bg_colour`` of None clears the colour.
    """

    name: Optional[TagName] = None
    active: Optional[bool] = None
    bg_colour: Optional[str] = None


class TagBinder:
    """Binds tag payloads to commands."""

    def __init__(self, tag_service: TagService, messages: Messages) -> None:
        self.tag_service = tag_service
        self.messages = messages

    def bind_create(self, payload: Mapping[str, Any]) -> BindResult[CreateTagCommand]:
        violations: list[Violation] = []

        name = payload.get("name")
        tag_name = None
        if name is None:
            violations.append(self._violation("name", "tag.name.error.undefined"))
        else:
            tag_name = self._bind_name(name, violations)

        bg_colour = self._bind_colour(payload.get("bg_colour"), violations)

        if violations:
            return BindResult(violations=violations)
        return BindResult(
            command=CreateTagCommand(name=tag_name, bg_colour=bg_colour)
        )

    def bind_update(self, payload: Mapping[str, Any]) -> BindResult[UpdateTagCommand]:
        violations: list[Violation] = []
        changes: dict[str, Any] = {}

        # null means not supplied, as for an absent key
        active = payload.get("active")
        if active is not None:
            if isinstance(active, bool):
                changes["active"] = active
            else:
                violations.append(
                    self._violation("active", "tag.active.error.invalid")
                )

        name = payload.get("name")
        if name is not None:
            tag_name = self._bind_name(name, violations)
            if tag_name is not None:
                changes["name"] = tag_name

        if "bg_colour" in payload:
            before = len(violations)
            bg_colour = self._bind_colour(payload["bg_colour"], violations)
            if len(violations) == before:
                changes["bg_colour"] = bg_colour

        if violations:
            return BindResult(violations=violations)
        return BindResult(command=UpdateTagCommand(**changes))

    def _bind_name(self, name: Any, violations: list[Violation]) -> Optional[TagName]:
        if not isinstance(name, str):
            violations.append(self._violation("name", "tag.name.error.invalid"))
            return None
        try:
            return self.tag_service.validate_name(name)
        except InvalidTagNameError:
            violations.append(self._violation("name", "tag.name.error.invalid"))
            return None

    def _bind_colour(self, value: Any, violations: list[Violation]) -> Optional[str]:
        # Empty string means no colour
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            violations.append(
                self._violation("bg_colour", "tag.bg_colour.error.invalid")
            )
            return None
        return value

    def _violation(self, name: str, key: str) -> Violation:
        return Violation(name=name, reason=self.messages(key))
