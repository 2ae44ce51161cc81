"""Configuration for the MusicBrainz web service client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClientConfig:
    """Configuration for the MusicBrainz client.

    The public API allows one request per second per client.
    """

    base_url: str = "https://musicbrainz.org"
    user_agent: str = "credit-resolver/0.1.0"
    request_interval: float = 1.0
    timeout: float = 30.0
