"""Core exceptions and protocols shared by the parser and the resolver."""

from credit_resolver.core.exceptions import (
    CreditResolverError,
    RemoteLookupError,
    StorageError,
)

__all__ = [
    "CreditResolverError",
    "RemoteLookupError",
    "StorageError",
]
