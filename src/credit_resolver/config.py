"""Configuration of the credit resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from credit_resolver.clients.config import ClientConfig
from credit_resolver.entities.caches import NAME_CACHE_NAME


def _default_cache_dir() -> Path:
    return Path("~/.cache/credit-resolver").expanduser()


@dataclass
class ResolverConfig:
    """Configuration for the copyright notice workflow."""

    # Web service
    client: ClientConfig = field(default_factory=ClientConfig)

    # Persistence of learned name -> MBID mappings
    cache_dir: Path = field(default_factory=_default_cache_dir)
    name_cache_name: str = NAME_CACHE_NAME

    # Type of the entities which own the copyrights
    entity_type: str = "label"
