"""Thankable resolution domain service."""

from collections import defaultdict
from typing import Iterable, Sequence

import logfire

from thanks.domain.error import ThankableNotFoundError, UnsupportedOwnerClassError
from thanks.domain.model.thankable import Thankable
from thanks.domain.service.thankable import ThankableRegistry
from thanks.domain.value import OwnerClassId, ThankedReference, UserId

from .base import Service


def _group_ids(
    references: Iterable[ThankedReference],
) -> dict[OwnerClassId, list[int]]:
    ids: dict[OwnerClassId, list[int]] = defaultdict(list)
    for reference in references:
        ids[reference.owner_class].append(reference.id)
    return ids


class ThankableResolver(Service):
    """Turns (owner class, id) references into Thankables.

    Resolution is all-or-nothing and batched: each owner class is looked up
    once per call, whatever the number of references.
    """

    def __init__(self, registry: ThankableRegistry) -> None:
        """Initialize thankable resolver.

        Args:
            registry: Registry of supported owner classes
        """
        self.registry = registry

    async def resolve(
        self, references: Sequence[ThankedReference]
    ) -> list[Thankable]:
        """Resolve references into thankables, preserving request order.

        Duplicate references collapse into one thankable.

        Args:
            references: References to resolve

        Returns:
            One thankable per distinct reference

        Raises:
            UnsupportedOwnerClassError: If any owner class is not registered;
                nothing is looked up in that case
            ThankableNotFoundError: If any referenced entity does not exist
        """
        unique = list(dict.fromkeys(references))

        with logfire.span("thankable_resolver.resolve", count=len(unique)):
            unsupported = sorted(
                {
                    r.owner_class
                    for r in unique
                    if not self.registry.supports(r.owner_class)
                }
            )
            if unsupported:
                logfire.warn(
                    "Unsupported owner classes requested", owner_classes=unsupported
                )
                raise UnsupportedOwnerClassError(unsupported, self.registry.names())

            resolved: dict[ThankedReference, Thankable] = {}
            for owner_class, ids in _group_ids(unique).items():
                handler = self.registry.get(owner_class)
                found = await handler.resolve(ids)
                for thankable in found.values():
                    resolved[thankable.reference] = thankable

            missing = [r for r in unique if r not in resolved]
            if missing:
                logfire.warn(
                    "Thanked entities not found", references=[str(r) for r in missing]
                )
                raise ThankableNotFoundError(missing)

            logfire.info("Thankables resolved", count=len(unique))
            return [resolved[r] for r in unique]

    async def refresh(self, thankables: Sequence[Thankable]) -> list[Thankable]:
        """Re-resolve stored thankables so names and links are current.

        Entities that no longer resolve (deleted, or owner class no longer
        registered) keep their stored snapshot.

        Args:
            thankables: Stored thankables

        Returns:
            Thankables in the same order
        """
        references = [t.reference for t in thankables]

        with logfire.span("thankable_resolver.refresh", count=len(references)):
            current: dict[ThankedReference, Thankable] = {}
            for owner_class, ids in _group_ids(dict.fromkeys(references)).items():
                handler = self.registry.get(owner_class)
                if handler is None:
                    logfire.warn(
                        "Stored thankable has unregistered owner class",
                        owner_class=owner_class,
                    )
                    continue
                found = await handler.resolve(ids)
                for thankable in found.values():
                    current[thankable.reference] = thankable

            return [current.get(t.reference, t) for t in thankables]

    async def recipients(self, thankables: Sequence[Thankable]) -> set[UserId]:
        """Union of the users reached by each thankable.

        Args:
            thankables: Resolved thankables

        Returns:
            Recipient user ids
        """
        recipients: set[UserId] = set()
        references = [t.reference for t in thankables]
        for owner_class, ids in _group_ids(dict.fromkeys(references)).items():
            handler = self.registry.get(owner_class)
            if handler is None:
                raise UnsupportedOwnerClassError([owner_class], self.registry.names())
            recipients |= await handler.recipients(ids)
        return recipients
