"""Copyright notice parsing: normalization, name boundaries and extraction."""

from credit_resolver.parsing.boundaries import NameBoundary, split_marks, split_owners
from credit_resolver.parsing.notice import NoticeParser, clean_type, parse_copyright_notice
from credit_resolver.parsing.transform import SubstitutionRule, transform
from credit_resolver.parsing.types import CopyrightStatement

__all__ = [
    "CopyrightStatement",
    "NameBoundary",
    "NoticeParser",
    "SubstitutionRule",
    "clean_type",
    "parse_copyright_notice",
    "split_marks",
    "split_owners",
    "transform",
]
