"""Protocols (interfaces) for the collaborators of the resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from credit_resolver.entities.types import Relationship, ResolvedEntity


@runtime_checkable
class StringStore(Protocol):
    """Key-value storage of string blobs, used to persist caches."""

    def get_item(self, name: str) -> str | None:
        """Return the stored string or None."""
        ...

    def set_item(self, name: str, value: str) -> None:
        """Store a string under the given name."""
        ...


@runtime_checkable
class EntityFetcher(Protocol):
    """Fetches an entity by its identifier."""

    async def fetch_entity(self, gid: str) -> ResolvedEntity:
        ...


@runtime_checkable
class EntitySearcher(Protocol):
    """Searches entities of a type by name."""

    async def search_entity(self, entity_type: str, query: str) -> list[ResolvedEntity]:
        ...


@runtime_checkable
class ConfirmationSurface(Protocol):
    """Interactive surface on which a human picks the target entity."""

    def open(self) -> None:
        """Show the surface to the user."""
        ...

    async def closed(self) -> None:
        """Resolve once the user confirmed or dismissed the surface."""
        ...

    @property
    def target_entity(self) -> ResolvedEntity | None:
        """Entity chosen by the user, None if dismissed."""
        ...


@runtime_checkable
class RelationshipSink(Protocol):
    """Receives the relationships created by the resolver."""

    def add(self, relationship: Relationship) -> None:
        ...
