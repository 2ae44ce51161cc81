"""Extraction of copyright and legal information from credit text."""

from __future__ import annotations

import logging
import re

from credit_resolver.parsing.boundaries import NameBoundary, split_marks, split_owners
from credit_resolver.parsing.transform import SubstitutionRule, transform
from credit_resolver.parsing.types import LICENSED, CopyrightStatement

logger = logging.getLogger(__name__)

NORMALIZATION_RULES: list[SubstitutionRule] = [
    (re.compile(r"\(C\)", re.IGNORECASE), "©"),
    (re.compile(r"\(P\)", re.IGNORECASE), "℗"),
    # French quotes used by some shops around names
    (re.compile(r"«(.+?)»"), r"\1"),
    # keep only the grant which is valid for the rest of the world
    (re.compile(r"for (.+?) and (.+?) for the world outside \1"), r"/ \2"),
    # ℗ in front of a licensing clause is not a phonographic copyright
    (re.compile(r"℗\s*(under )", re.IGNORECASE), r"\1"),
]

TYPE_RULES: list[SubstitutionRule] = [
    (re.compile(r"licen[sc]ed?"), LICENSED),
]

LICENSE_DIRECTION = re.compile(rf"{LICENSED} (to|from)")

DEFAULT_BOUNDARY = NameBoundary()


def clean_type(raw_type: str) -> tuple[str, str | None]:
    """Clean a free text copyright/legal type.

    Returns the standardized type and the licensing direction, if any.
    """
    cleaned = transform(raw_type.lower().strip(), TYPE_RULES)
    m = LICENSE_DIRECTION.fullmatch(cleaned)
    if m:
        return LICENSED, m.group(1)
    return cleaned, None


class NoticeParser:
    """Two-pass parser for copyright notices.

    Pass 1 finds runs of ©/℗ marks with an optional year and owner names.
    Pass 2 finds licensing, distribution and marketing clauses.
    """

    def __init__(self, boundary: NameBoundary = DEFAULT_BOUNDARY) -> None:
        self.boundary = boundary
        self.copyright_pattern = re.compile(
            r"([©℗](?:\s*[&+]?\s*[©℗])?)(?:.+?;)?\s*(\d{4})?\s+" + boundary.pattern,
            re.MULTILINE,
        )
        self.legal_info_pattern = re.compile(
            r"(licen[sc]ed? (?:to|from)|(?:distributed|marketed) by)\s+" + boundary.pattern,
            re.IGNORECASE | re.MULTILINE,
        )

    def parse(self, text: str) -> list[CopyrightStatement]:
        """Extract all copyright and legal information from the given text."""
        text = transform(text, NORMALIZATION_RULES)
        statements: list[CopyrightStatement] = []

        for m in self.copyright_pattern.finditer(text):
            types = tuple(dict.fromkeys(clean_type(mark)[0] for mark in split_marks(m.group(1))))
            for name in split_owners(m.group(3)):
                statements.append(CopyrightStatement(name=name, types=types, year=m.group(2)))

        for m in self.legal_info_pattern.finditer(text):
            name = m.group(2).strip()
            if not name:
                continue
            legal_type, direction = clean_type(m.group(1))
            statements.append(
                CopyrightStatement(name=name, types=(legal_type,), direction=direction)
            )

        logger.debug("Parsed %d statements from %r", len(statements), text)
        return statements


_default_parser = NoticeParser()


def parse_copyright_notice(text: str) -> list[CopyrightStatement]:
    """Extract all copyright and legal information with the default rules."""
    return _default_parser.parse(text)
