"""Entity resolution package: memoizing caches, policies and orchestration."""

from credit_resolver.entities.cache import FunctionCache
from credit_resolver.entities.caches import build_entity_cache, build_name_cache
from credit_resolver.entities.ids import NegativeIdGenerator
from credit_resolver.entities.link_types import LINK_TYPES, get_link_type
from credit_resolver.entities.policy import AutomaticPolicy, ManualPolicy, ResolutionPolicy
from credit_resolver.entities.resolver import RelationshipLog, ResolutionOrchestrator
from credit_resolver.entities.storage import FileStore, MemoryStore
from credit_resolver.entities.types import Relationship, ResolvedEntity

__all__ = [
    "AutomaticPolicy",
    "FileStore",
    "FunctionCache",
    "LINK_TYPES",
    "ManualPolicy",
    "MemoryStore",
    "NegativeIdGenerator",
    "Relationship",
    "RelationshipLog",
    "ResolutionOrchestrator",
    "ResolutionPolicy",
    "ResolvedEntity",
    "build_entity_cache",
    "build_name_cache",
    "get_link_type",
]
