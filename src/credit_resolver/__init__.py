"""Credit Resolver - copyright notices to MusicBrainz relationships.

Extracts copyright and legal information from pasted credits and resolves
the owners to canonical entities, remembering the choices of the user.

Example:
    >>> from credit_resolver import parse_copyright_notice
    >>> parse_copyright_notice("℗ & © 2021 Example Records")
    [CopyrightStatement(name='Example Records', types=('℗', '©'), year='2021', direction=None)]
"""

from credit_resolver.core.exceptions import (
    CreditResolverError,
    RemoteLookupError,
    StorageError,
)
from credit_resolver.entities import (
    FileStore,
    FunctionCache,
    MemoryStore,
    Relationship,
    RelationshipLog,
    ResolutionOrchestrator,
    ResolvedEntity,
    build_entity_cache,
    build_name_cache,
)
from credit_resolver.parsing import (
    CopyrightStatement,
    NoticeParser,
    parse_copyright_notice,
    transform,
)
from credit_resolver.workflow import CopyrightNoticeWorkflow, process_credit_lines

__version__ = "0.1.0"

__all__ = [
    "CopyrightNoticeWorkflow",
    "CopyrightStatement",
    "CreditResolverError",
    "FileStore",
    "FunctionCache",
    "MemoryStore",
    "NoticeParser",
    "Relationship",
    "RelationshipLog",
    "RemoteLookupError",
    "ResolutionOrchestrator",
    "ResolvedEntity",
    "StorageError",
    "build_entity_cache",
    "build_name_cache",
    "parse_copyright_notice",
    "process_credit_lines",
    "transform",
]
