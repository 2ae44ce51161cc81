"""Async client for the MusicBrainz web services."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from credit_resolver.clients.config import ClientConfig
from credit_resolver.clients.rate_limit import RateLimiter, rate_limit, shared_limiter
from credit_resolver.core.exceptions import RemoteLookupError
from credit_resolver.entities.types import ResolvedEntity

logger = logging.getLogger(__name__)


class MusicBrainzClient:
    """Client for the internal JSON API (``/ws/js``) and the public API (``/ws/2``).

    All requests of all clients which share a limiter are serialized,
    by default one request per second process-wide.

    Example:
        >>> async with MusicBrainzClient() as client:
        ...     labels = await client.search_entity("label", "Warp Records")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        limiter: RateLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._limiter = limiter or shared_limiter(self._config.request_interval)
        self._http = httpx.AsyncClient(
            base_url=self._config.base_url,
            headers={
                "Accept": "application/json",
                "User-Agent": self._config.user_agent,
            },
            timeout=self._config.timeout,
            transport=transport,
        )
        self._get = rate_limit(self._http.get, self._limiter)

    async def __aenter__(self) -> MusicBrainzClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_entity(self, gid: str) -> ResolvedEntity:
        """Fetch the entity with the given MBID from the internal API."""
        data = await self._request_json(f"/ws/js/entity/{gid}")
        return ResolvedEntity.from_json(data)

    async def search_entity(self, entity_type: str, query: str) -> list[ResolvedEntity]:
        """Search for entities of the given type, best match first."""
        data = await self._request_json(f"/ws/js/{entity_type}", {"q": query})
        # the last item of the result list is the pager
        return [
            ResolvedEntity.from_json(item, entity_type)
            for item in data
            if isinstance(item, dict) and "name" in item
        ]

    async def fetch_from_api(
        self,
        endpoint: str,
        query: dict[str, str] | None = None,
        inc: Iterable[str] = (),
    ) -> Any:
        """Query the public API and return the JSON result.

        Args:
            endpoint: Endpoint (e.g. the entity type) which should be queried.
            query: Query parameters.
            inc: Include parameters which are added to the query parameters.
        """
        params = dict(query or {})
        inc = list(inc)
        if inc:
            params["inc"] = " ".join(inc)
        params["fmt"] = "json"
        return await self._request_json(f"/ws/2/{endpoint}", params)

    async def get_entity_for_resource_url(
        self, entity_type: str, resource_url: str
    ) -> ResolvedEntity | None:
        """Return the first entity of the type which is linked to the URL."""
        try:
            url = await self.fetch_from_api(
                "url", {"resource": resource_url}, [f"{entity_type}-rels"]
            )
        except RemoteLookupError as e:
            logger.info("No URL entity for %s: %s", resource_url, e)
            return None

        for rel in url.get("relations", []):
            if rel.get("target-type") == entity_type and entity_type in rel:
                return ResolvedEntity.from_json(rel[entity_type], entity_type)
        return None

    async def _request_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        try:
            response = await self._get(path, params=params)
        except httpx.HTTPError as e:
            raise RemoteLookupError(path, message=f"Request to {path} failed: {e}") from e
        if not response.is_success:
            raise RemoteLookupError(str(response.url), response.status_code)
        try:
            return response.json()
        except ValueError as e:
            # maintenance pages and truncated bodies
            raise RemoteLookupError(
                str(response.url),
                response.status_code,
                message=f"Invalid JSON from {response.url}: {e}",
            ) from e
