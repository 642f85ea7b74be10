"""Feature flag request binder."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from thanks.application.binder.common import BindResult, Violation
from thanks.util.messages import Messages


class UpdateConfigCommand(BaseModel):
    """Flags to change; only fields in ``model_fields_set`` were supplied."""

    tags_enabled: Optional[bool] = None
    tags_mandatory: Optional[bool] = None

    def changes(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class ConfigBinder:
    """Binds feature flag payloads; every flag must be a boolean."""

    def __init__(self, messages: Messages) -> None:
        self.messages = messages

    def bind_update(
        self, payload: Mapping[str, Any]
    ) -> BindResult[UpdateConfigCommand]:
        violations: list[Violation] = []
        changes: dict[str, bool] = {}

        for name, value in payload.items():
            if name not in UpdateConfigCommand.model_fields:
                violations.append(
                    Violation(
                        name=name,
                        reason=self.messages("config.flag.error.unknown", name),
                    )
                )
            elif not isinstance(value, bool):
                violations.append(
                    Violation(
                        name=name,
                        reason=self.messages("config.flag.error.invalid", name),
                    )
                )
            else:
                changes[name] = value

        if violations:
            return BindResult(violations=violations)
        return BindResult(command=UpdateConfigCommand(**changes))
