"""Resolution policies: how unknown names become target entities.

A policy is chosen once per batch of statements. The automatic policy
takes the first search result and never asks, the manual policy asks a
human and learns the chosen entity for the name.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from credit_resolver.core.protocols import ConfirmationSurface, EntitySearcher
from credit_resolver.entities.cache import FunctionCache
from credit_resolver.entities.types import Relationship, ResolvedEntity

logger = logging.getLogger(__name__)

ConfirmationFactory = Callable[[Relationship], ConfirmationSurface]


class ResolutionPolicy(ABC):
    """Strategy for names which are not in the name cache."""

    @abstractmethod
    async def initial_target(self, name: str, entity_type: str) -> ResolvedEntity | None:
        """Target entity for a name without a cached MBID, None to skip it."""
        ...

    @abstractmethod
    async def confirm(self, draft: Relationship, name: str) -> ResolvedEntity | None:
        """Resolve the unresolved target of a draft, None to skip it."""
        ...


class AutomaticPolicy(ResolutionPolicy):
    """Adopts the first search result, without confirmation or learning."""

    def __init__(self, searcher: EntitySearcher) -> None:
        self._searcher = searcher

    async def initial_target(self, name: str, entity_type: str) -> ResolvedEntity | None:
        results = await self._searcher.search_entity(entity_type, name)
        if not results:
            logger.info("No %s found for %r", entity_type, name)
            return None
        return results[0]

    async def confirm(self, draft: Relationship, name: str) -> ResolvedEntity | None:
        return draft.target if draft.target.is_resolved else None


class ManualPolicy(ResolutionPolicy):
    """Lets a human pick the entity and remembers the choice."""

    def __init__(
        self,
        confirmation_factory: ConfirmationFactory,
        name_cache: FunctionCache[str],
    ) -> None:
        self._confirmation_factory = confirmation_factory
        self._name_cache = name_cache

    async def initial_target(self, name: str, entity_type: str) -> ResolvedEntity | None:
        return ResolvedEntity.placeholder(name, entity_type)

    async def confirm(self, draft: Relationship, name: str) -> ResolvedEntity | None:
        surface = self._confirmation_factory(draft)
        surface.open()
        await surface.closed()

        chosen = surface.target_entity
        if chosen is None or not chosen.is_resolved:
            logger.info("No entity chosen for %r, skipping", name)
            return None

        self._name_cache.set([chosen.entity_type, name], chosen.id)
        logger.info("Learned %s %r -> %s", chosen.entity_type, name, chosen.id)
        return chosen
