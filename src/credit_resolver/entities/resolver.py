"""ResolutionOrchestrator: statements -> target entities -> relationships."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from credit_resolver.core.exceptions import RemoteLookupError
from credit_resolver.core.protocols import EntitySearcher, RelationshipSink
from credit_resolver.entities.cache import FunctionCache
from credit_resolver.entities.ids import NegativeIdGenerator
from credit_resolver.entities.link_types import LINK_TYPES, LinkTypeTable, get_link_type
from credit_resolver.entities.policy import (
    AutomaticPolicy,
    ConfirmationFactory,
    ManualPolicy,
    ResolutionPolicy,
)
from credit_resolver.entities.types import Relationship, ResolvedEntity
from credit_resolver.parsing.types import PHONOGRAPHIC_COPYRIGHT, CopyrightStatement

logger = logging.getLogger(__name__)


class RelationshipLog:
    """Relationship sink which simply collects everything it receives."""

    def __init__(self) -> None:
        self.relationships: list[Relationship] = []

    def add(self, relationship: Relationship) -> None:
        self.relationships.append(relationship)

    def __len__(self) -> int:
        return len(self.relationships)


class ResolutionOrchestrator:
    """Resolves the owners of copyright statements and creates relationships.

    There are three ways to find the target entity of a statement:
    (1) map the name to an MBID via the name cache and fetch the entity,
    (2) take the first search result for the name (automatic mode),
    (3) let a human pick the entity for the name (manual mode).

    Statements are processed strictly one after another, a confirmation
    has to be completed before the next statement is looked at.
    """

    def __init__(
        self,
        entity_cache: FunctionCache[ResolvedEntity],
        name_cache: FunctionCache[str],
        searcher: EntitySearcher,
        sink: RelationshipSink,
        confirmation_factory: ConfirmationFactory | None = None,
        *,
        entity_type: str = "label",
        link_types: LinkTypeTable = LINK_TYPES,
        id_generator: Callable[[], int] | None = None,
    ) -> None:
        self.entity_cache = entity_cache
        self.name_cache = name_cache
        self.searcher = searcher
        self.sink = sink
        self.confirmation_factory = confirmation_factory
        self.entity_type = entity_type
        self.link_types = link_types
        self._next_id = id_generator or NegativeIdGenerator()

    def policy_for(self, automatic_mode: bool) -> ResolutionPolicy:
        if automatic_mode:
            return AutomaticPolicy(self.searcher)
        if self.confirmation_factory is None:
            raise ValueError("Manual mode requires a confirmation factory")
        return ManualPolicy(self.confirmation_factory, self.name_cache)

    async def resolve_and_create(
        self,
        statements: Iterable[CopyrightStatement],
        automatic_mode: bool = False,
        recordings: Iterable[ResolvedEntity] = (),
    ) -> bool:
        """Create relationships for all statements.

        Phonographic copyrights are also added to the given recordings.
        Returns whether at least one relationship has been created.
        """
        policy = self.policy_for(automatic_mode)
        recordings = tuple(recordings)
        added = 0

        for statement in statements:
            try:
                added += await self._process_statement(statement, policy, recordings)
            except RemoteLookupError as e:
                logger.warning("Skipping %r: %s", statement.name, e)

        return added > 0

    async def _process_statement(
        self,
        statement: CopyrightStatement,
        policy: ResolutionPolicy,
        recordings: tuple[ResolvedEntity, ...],
    ) -> int:
        target = await self._initial_target(statement, policy)
        if target is None:
            return 0

        added = 0
        for statement_type in statement.types:
            draft = self._draft("release", statement, statement_type, target)
            target, created = await self._materialize(draft, statement, policy)
            added += created

            # also add phonographic copyrights to the selected recordings
            if statement_type == PHONOGRAPHIC_COPYRIGHT and recordings and target.is_resolved:
                batch = self._draft("recording", statement, statement_type, target, recordings)
                self._create(batch)
                added += 1

        return added

    async def _initial_target(
        self,
        statement: CopyrightStatement,
        policy: ResolutionPolicy,
    ) -> ResolvedEntity | None:
        target_mbid = await self.name_cache.get(self.entity_type, statement.name)
        if target_mbid:
            logger.debug("Name cache hit: %r -> %s", statement.name, target_mbid)
            return await self.entity_cache.get(target_mbid)
        return await policy.initial_target(statement.name, self.entity_type)

    async def _materialize(
        self,
        draft: Relationship,
        statement: CopyrightStatement,
        policy: ResolutionPolicy,
    ) -> tuple[ResolvedEntity, int]:
        if draft.target.is_resolved:
            self._create(draft)
            return draft.target, 1

        chosen = await policy.confirm(draft, statement.name)
        if chosen is None:
            return draft.target, 0
        self._create(replace(draft, target=chosen))
        return chosen, 1

    def _draft(
        self,
        source_type: str,
        statement: CopyrightStatement,
        statement_type: str,
        target: ResolvedEntity,
        sources: tuple[ResolvedEntity, ...] = (),
    ) -> Relationship:
        return Relationship(
            source_type=source_type,
            target=target,
            link_type_id=get_link_type(
                source_type,
                target.entity_type,
                statement_type,
                statement.direction,
                self.link_types,
            ),
            begin_year=statement.year,
            end_year=statement.year,
            sources=sources,
        )

    def _create(self, draft: Relationship) -> Relationship:
        relationship = replace(draft, id=self._next_id())
        self.sink.add(relationship)
        logger.info(
            "Created %s relationship %s -> %s (link type %s)",
            relationship.source_type,
            relationship.id,
            relationship.target.id,
            relationship.link_type_id,
        )
        return relationship
