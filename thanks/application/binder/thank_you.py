"""Thank-you request binder."""

from typing import Any, Mapping, Optional

import logfire
from pydantic import BaseModel, Field

from thanks.application.binder.common import (
    MISSING,
    BindResult,
    Violation,
    coerce_int,
    coerce_str,
)
from thanks.domain.error import ThankableNotFoundError, UnsupportedOwnerClassError
from thanks.domain.model import FeatureFlags, Tag, Thankable
from thanks.domain.service import TagService, ThankableResolver
from thanks.domain.value import OwnerClassId, TagId, ThankedReference
from thanks.util.messages import Messages


class CreateThankYouCommand(BaseModel):
    """Validated input for creating a thank you."""

    thanked: list[Thankable] = Field(min_length=1)
    description: str
    tags: list[Tag] = Field(default_factory=list)


class UpdateThankYouCommand(BaseModel):
    """Validated input for updating a thank you; None means "leave as is"."""

    thanked: Optional[list[Thankable]] = None
    description: Optional[str] = None
    tags: Optional[list[Tag]] = None


def _absent(value: Any) -> bool:
    return value is MISSING or value is None


class ThankYouBinder:
    """Binds thank-you payloads to commands.

    All violations in a payload are collected, in the order thanked,
    description, tags. Thanked references and tag ids are resolved while
    binding so that a bound command only holds entities that exist.
    """

    def __init__(
        self,
        flags: FeatureFlags,
        thankable_resolver: ThankableResolver,
        tag_service: TagService,
        messages: Messages,
    ) -> None:
        """Initialize thank-you binder.

        Args:
            flags: Current feature flags (tags enabled / mandatory)
            thankable_resolver: Resolver for thanked references
            tag_service: Tag domain service
            messages: Message catalogue for violation reasons
        """
        self.flags = flags
        self.thankable_resolver = thankable_resolver
        self.tag_service = tag_service
        self.messages = messages

    async def bind_create(
        self, payload: Mapping[str, Any]
    ) -> BindResult[CreateThankYouCommand]:
        """Bind a create payload.

        ``thanked`` and ``description`` are required; ``tags`` is required
        only when tags are mandatory.
        """
        violations: list[Violation] = []

        thanked = await self._bind_thanked(
            payload.get("thanked", MISSING), violations, required=True
        )
        description = self._bind_description(
            payload.get("description", MISSING), violations, required=True
        )
        tags = await self._bind_tags(
            payload.get("tags", MISSING),
            violations,
            required=self.flags.tags_mandatory,
        )

        if violations:
            logfire.info(
                "Create thank you payload rejected",
                violations=[v.name for v in violations],
            )
            return BindResult(violations=violations)

        return BindResult(
            command=CreateThankYouCommand(
                thanked=thanked, description=description, tags=tags or []
            )
        )

    async def bind_update(
        self, payload: Mapping[str, Any]
    ) -> BindResult[UpdateThankYouCommand]:
        """Bind an update payload; only supplied fields are validated."""
        violations: list[Violation] = []

        thanked = await self._bind_thanked(
            payload.get("thanked", MISSING), violations, required=False
        )
        description = self._bind_description(
            payload.get("description", MISSING), violations, required=False
        )
        tags = await self._bind_tags(
            payload.get("tags", MISSING), violations, required=False
        )

        if violations:
            logfire.info(
                "Update thank you payload rejected",
                violations=[v.name for v in violations],
            )
            return BindResult(violations=violations)

        return BindResult(
            command=UpdateThankYouCommand(
                thanked=thanked, description=description, tags=tags
            )
        )

    async def _bind_thanked(
        self, value: Any, violations: list[Violation], *, required: bool
    ) -> Optional[list[Thankable]]:
        if _absent(value):
            if required:
                violations.append(self._violation("thanked", "thanked.error.empty"))
            return None
        if not isinstance(value, list):
            violations.append(self._violation("thanked", "thanked.error.not_array"))
            return None
        if not value:
            violations.append(self._violation("thanked", "thanked.error.empty"))
            return None

        references = []
        for item in value:
            reference = self._reference(item)
            if reference is None:
                violations.append(
                    self._violation("thanked", "thanked.error.malformed")
                )
                return None
            references.append(reference)

        try:
            return await self.thankable_resolver.resolve(references)
        except UnsupportedOwnerClassError as e:
            violations.append(
                self._violation(
                    "thanked", "thanked.error.not_supported", ", ".join(e.supported)
                )
            )
        except ThankableNotFoundError as e:
            violations.extend(
                self._violation("thanked", "thanked.error.not_found", reference)
                for reference in e.references
            )
        return None

    @staticmethod
    def _reference(item: Any) -> Optional[ThankedReference]:
        if not isinstance(item, Mapping):
            return None
        owner_class = coerce_int(item.get("oclass"))
        entity_id = coerce_int(item.get("id"))
        if owner_class is None or entity_id is None:
            return None
        return ThankedReference(owner_class=OwnerClassId(owner_class), id=entity_id)

    def _bind_description(
        self, value: Any, violations: list[Violation], *, required: bool
    ) -> Optional[str]:
        if _absent(value):
            if required:
                violations.append(
                    self._violation("description", "description.error.empty")
                )
            return None

        description = coerce_str(value)
        if description is None:
            violations.append(
                self._violation("description", "description.error.not_string")
            )
            return None
        if not description.strip():
            violations.append(
                self._violation("description", "description.error.empty")
            )
            return None
        return description

    async def _bind_tags(
        self, value: Any, violations: list[Violation], *, required: bool
    ) -> Optional[list[Tag]]:
        if _absent(value):
            if required:
                violations.append(self._violation("tags", "tags.error.empty"))
            return None
        if not self.flags.tags_enabled:
            violations.append(self._violation("tags", "tags.error.disabled"))
            return None
        if not isinstance(value, list):
            violations.append(self._violation("tags", "tags.error.not_array"))
            return None

        ids = [coerce_int(v) for v in value]
        if any(i is None for i in ids):
            violations.append(self._violation("tags", "tags.error.not_integers"))
            return None

        tag_ids = [TagId(i) for i in dict.fromkeys(ids)]
        if not tag_ids:
            if self.flags.tags_mandatory:
                violations.append(self._violation("tags", "tags.error.empty"))
                return None
            return []

        found = await self.tag_service.get_by_ids(tag_ids)
        missing = [i for i in tag_ids if i not in found]
        if missing:
            violations.extend(
                self._violation("tags", "tags.error.not_found", i) for i in missing
            )
            return None
        return [found[i] for i in tag_ids]

    def _violation(self, name: str, key: str, *args: object) -> Violation:
        return Violation(name=name, reason=self.messages(key, *args))
