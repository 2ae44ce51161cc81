"""Rate limiting for calls to remote APIs."""

from __future__ import annotations

import asyncio
import functools
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimiter:
    """Lets at most one call start per interval.

    Callers queue up in arrival order and wait for their turn instead of
    failing. ``clock`` and ``sleep`` can be replaced for testing.
    """

    def __init__(
        self,
        interval: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._next_start: float | None = None
        self._lock: asyncio.Lock | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    def _get_lock(self) -> asyncio.Lock:
        # a lock must not be shared between event loops
        loop = asyncio.get_running_loop()
        if self._lock is None or self._loop is not loop:
            self._lock = asyncio.Lock()
            self._loop = loop
        return self._lock

    async def acquire(self) -> None:
        """Wait until the next call may start."""
        async with self._get_lock():
            now = self._clock()
            if self._next_start is not None and now < self._next_start:
                delay = self._next_start - now
                logger.debug("Rate limited, waiting %.3fs", delay)
                await self._sleep(delay)
                now = max(self._clock(), self._next_start)
            self._next_start = now + self.interval

    async def __aenter__(self) -> RateLimiter:
        await self.acquire()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


_shared_limiters: dict[float, RateLimiter] = {}


def shared_limiter(interval: float = 1.0) -> RateLimiter:
    """Process-wide limiter for the given interval."""
    if interval not in _shared_limiters:
        _shared_limiters[interval] = RateLimiter(interval)
    return _shared_limiters[interval]


def rate_limit(
    func: Callable[..., Awaitable[T]],
    limiter: RateLimiter,
) -> Callable[..., Awaitable[T]]:
    """Wrap an async function so that its calls pass through the limiter."""

    @functools.wraps(func)
    async def limited(*args: Any, **kwargs: Any) -> T:
        await limiter.acquire()
        return await func(*args, **kwargs)

    return limited
