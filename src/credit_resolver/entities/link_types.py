"""Relationship link type IDs of MusicBrainz (incomplete)."""

from __future__ import annotations

import logging

from credit_resolver.parsing.types import (
    COPYRIGHT,
    DISTRIBUTED_BY,
    MARKETED_BY,
    PHONOGRAPHIC_COPYRIGHT,
)

logger = logging.getLogger(__name__)

LinkTypeTable = dict[str, dict[str, dict[str, int]]]

# source type -> target type -> statement type -> link type ID
LINK_TYPES: LinkTypeTable = {
    "release": {
        "label": {
            COPYRIGHT: 708,
            PHONOGRAPHIC_COPYRIGHT: 711,
            "licensed from": 712,
            "licensed to": 833,
            DISTRIBUTED_BY: 361,
            MARKETED_BY: 848,
        },
    },
    "recording": {
        "label": {
            PHONOGRAPHIC_COPYRIGHT: 867,
        },
    },
}


def link_type_key(statement_type: str, direction: str | None = None) -> str:
    if direction:
        return f"{statement_type} {direction}"
    return statement_type


def get_link_type(
    source_type: str,
    target_type: str,
    statement_type: str,
    direction: str | None = None,
    table: LinkTypeTable = LINK_TYPES,
) -> int | None:
    """Look up the link type ID, None if the combination is unknown."""
    key = link_type_key(statement_type, direction)
    link_type_id = table.get(source_type, {}).get(target_type, {}).get(key)
    if link_type_id is None:
        logger.warning("No link type for %s-%s %r", source_type, target_type, key)
    return link_type_id
