"""Web service clients."""

from credit_resolver.clients.config import ClientConfig
from credit_resolver.clients.musicbrainz import MusicBrainzClient
from credit_resolver.clients.rate_limit import RateLimiter, rate_limit, shared_limiter

__all__ = [
    "ClientConfig",
    "MusicBrainzClient",
    "RateLimiter",
    "rate_limit",
    "shared_limiter",
]
