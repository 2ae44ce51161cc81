"""Pytest fixtures for credit-resolver tests.

Provides fixtures for:
- A fake MusicBrainz service (fetch by MBID + search) with call tracking
- Scripted confirmation surfaces standing in for a human
- Fresh caches and orchestrators wired to the fakes
- A fake clock for rate limiting
"""

from __future__ import annotations

import itertools

import pytest

from credit_resolver.entities.caches import build_entity_cache, build_name_cache
from credit_resolver.entities.resolver import RelationshipLog, ResolutionOrchestrator
from credit_resolver.entities.storage import MemoryStore
from credit_resolver.entities.types import ResolvedEntity

from tests.fakes import ConfirmationScript, FakeClock, FakeEntityService


# ============================================================================
# Entity fixtures
# ============================================================================


@pytest.fixture
def foo_records() -> ResolvedEntity:
    return ResolvedEntity(name="Foo Records", entity_type="label", id="mbid-foo")


@pytest.fixture
def service(foo_records: ResolvedEntity) -> FakeEntityService:
    return FakeEntityService(entities={foo_records.id: foo_records})


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def name_cache(store: MemoryStore):
    return build_name_cache(store)


@pytest.fixture
def entity_cache(service: FakeEntityService):
    return build_entity_cache(service)


@pytest.fixture
def sink() -> RelationshipLog:
    return RelationshipLog()


@pytest.fixture
def script() -> ConfirmationScript:
    return ConfirmationScript()


@pytest.fixture
def orchestrator(entity_cache, name_cache, service, sink, script) -> ResolutionOrchestrator:
    return ResolutionOrchestrator(
        entity_cache,
        name_cache,
        service,
        sink,
        script,
        id_generator=itertools.count(1).__next__,
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
