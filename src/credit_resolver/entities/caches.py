"""The two caches of the resolver: entities by MBID and names to MBIDs."""

from __future__ import annotations

from typing import Any

from credit_resolver.core.protocols import EntityFetcher, StringStore
from credit_resolver.entities.cache import FunctionCache
from credit_resolver.entities.types import ResolvedEntity

NAME_CACHE_NAME = "nameToMBIDCache"


def _name_to_mbid(entity_type: str, name: str) -> str | None:
    """Always misses, name mappings are only learned from users."""
    return None


def build_entity_cache(
    fetcher: EntityFetcher,
    data: dict[str, Any] | None = None,
) -> FunctionCache[ResolvedEntity]:
    """Session cache for fetched entities, keyed by MBID."""
    return FunctionCache(
        fetcher.fetch_entity,
        key_mapper=lambda gid: [gid],
        name="entityCache",
        data=data,
    )


def build_name_cache(
    storage: StringStore | None = None,
    name: str = NAME_CACHE_NAME,
) -> FunctionCache[str]:
    """Persistent cache which maps entity type and name to an MBID."""
    return FunctionCache(
        _name_to_mbid,
        key_mapper=lambda entity_type, name: [entity_type, name],
        name=name,
        storage=storage,
    )
