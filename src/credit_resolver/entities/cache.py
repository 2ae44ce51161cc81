"""Memoizing cache for expensive (possibly async) functions."""

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from credit_resolver.core.exceptions import StorageError
from credit_resolver.core.protocols import StringStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FunctionCache(Generic[T]):
    """Caches the results of an expensive function.

    Results are kept in nested records: the key mapper turns the function
    parameters into key components, all but the last one address nested
    records, the last one indexes the result. A result of None is never
    cached, so absence and a None result are the same thing.

    Concurrent lookups of the same missing key may compute it twice.
    """

    def __init__(
        self,
        expensive_function: Callable[..., T | Any],
        *,
        key_mapper: Callable[..., Sequence[str]],
        name: str = "defaultCache",
        storage: StringStore | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.expensive_function = expensive_function
        self.key_mapper = key_mapper
        self.name = name
        self.storage = storage
        self.data: dict[str, Any] = data if data is not None else {}

    async def get(self, *params: Any) -> T | None:
        """Look up the result for the given parameters.

        If the result is not cached yet, it is computed and added to the
        cache. An empty last key component is a miss without computation.
        """
        keys = list(self.key_mapper(*params))
        last_key = keys.pop() if keys else None
        if not last_key:
            return None

        record = self._get(keys)
        if record.get(last_key) is None:
            logger.debug("Cache %s miss: %s", self.name, [*keys, last_key])
            new_entry = self.expensive_function(*params)
            if inspect.isawaitable(new_entry):
                new_entry = await new_entry
            if new_entry is not None:
                record[last_key] = new_entry

        return record.get(last_key)

    def set(self, keys: Sequence[str], value: T) -> None:
        """Manually set the cached value for the given key components."""
        keys = list(keys)
        last_key = keys.pop()
        self._get(keys)[last_key] = value

    def load(self) -> None:
        """Load the persisted cache entries."""
        if self.storage is None:
            return
        stored_data = self.storage.get_item(self.name)
        if stored_data:
            try:
                self.data = json.loads(stored_data)
            except json.JSONDecodeError as e:
                raise StorageError(f"Corrupt data for cache {self.name}: {e}") from e
            logger.debug("Loaded cache %s", self.name)

    def store(self) -> None:
        """Persist all entries of the cache."""
        if self.storage is None:
            return
        self.storage.set_item(self.name, json.dumps(self.data, ensure_ascii=False))

    def clear(self) -> None:
        """Clear all entries of the cache and persist the change."""
        self.data = {}
        self.store()

    def _get(self, keys: Sequence[str]) -> dict[str, Any]:
        """Return the record indexed by the keys, creating missing records."""
        record = self.data
        for key in keys:
            if record.get(key) is None:
                record[key] = {}
            record = record[key]
        return record
