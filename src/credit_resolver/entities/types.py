"""Data types for entity resolution and relationship creation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResolvedEntity:
    """A canonical entity, or a name-only placeholder if ``id`` is None."""

    name: str
    entity_type: str
    id: str | None = None

    @property
    def is_resolved(self) -> bool:
        return bool(self.id)

    @classmethod
    def placeholder(cls, name: str, entity_type: str) -> ResolvedEntity:
        """Name-only entity which still has to be confirmed by a human."""
        return cls(name=name, entity_type=entity_type)

    @classmethod
    def from_json(cls, data: dict[str, Any], entity_type: str = "") -> ResolvedEntity:
        """Build an entity from a web service response.

        The internal JSON API uses ``gid`` and ``entityType``, the public
        API uses ``id`` and leaves the type to the caller.
        """
        return cls(
            name=data.get("name", ""),
            entity_type=data.get("entityType") or entity_type,
            id=data.get("gid") or data.get("id"),
        )


@dataclass(frozen=True)
class Relationship:
    """A relationship between the edited source and a target entity.

    ``sources`` is empty for relationships of the edited entity itself and
    lists the source entities of a batch otherwise. ``id`` is None until
    the relationship is created.
    """

    source_type: str
    target: ResolvedEntity
    link_type_id: int | None
    begin_year: str | None = None
    end_year: str | None = None
    sources: tuple[ResolvedEntity, ...] = field(default_factory=tuple)
    id: int | None = None
