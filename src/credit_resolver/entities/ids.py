"""Generators for the IDs of newly created relationships."""

from __future__ import annotations

import itertools

MIN_SAFE_INTEGER = -(2**53 - 1)


class NegativeIdGenerator:
    """Issues unique negative IDs for new relationships.

    Counts up from the minimum safe integer to avoid collisions with the
    IDs assigned by the server, which decrease from -1.
    """

    def __init__(self, start: int = MIN_SAFE_INTEGER) -> None:
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)
