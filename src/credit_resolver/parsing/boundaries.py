"""Boundary rules which decide where an owner name ends.

Both passes of the notice parser share one ``NameBoundary`` so that they
agree on where a name ends. The rules are kept as separate parts:

- legal suffixes (``LLC``, ``LLP``) and abbreviated suffixes with an
  optional trailing period (``Inc``, ``Ltd``) are absorbed into the name,
- a name which ends with a period is complete,
- otherwise the name stops at the end of the line or before the first
  stop sequence (comma, period, `` under ``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# a slash separates co-owners unless it is part of an abbreviation like "A/S"
OWNER_SEPARATOR = re.compile(r"/(?=\s|\w{2}|\w\s)")

MARK_SEPARATOR = re.compile(r"[&+]|(?<=[©℗])(?=[©℗])")


@dataclass(frozen=True)
class NameBoundary:
    """Matcher for the end of an owner name."""

    # only abbreviated suffixes absorb a trailing period, "Foo LLC." is "Foo LLC"
    legal_suffixes: tuple[str, ...] = ("LLC", "LLP")
    abbreviated_suffixes: tuple[str, ...] = ("Inc", "Ltd")
    stop_sequences: tuple[str, ...] = (",", ".", " under ")

    @property
    def suffix_pattern(self) -> str:
        """Optional legal suffix, possibly preceded by a comma."""
        alternatives = [re.escape(suffix) for suffix in self.legal_suffixes]
        if self.abbreviated_suffixes:
            abbreviated = "|".join(re.escape(s) for s in self.abbreviated_suffixes)
            alternatives.append(rf"(?:{abbreviated})\.?")
        return r"(?:,? (?:{}))?".format("|".join(alternatives))

    @property
    def end_pattern(self) -> str:
        """Zero-width end of a name."""
        stops = "|".join(re.escape(s) for s in self.stop_sequences)
        return rf"(?:(?<=\.)|$|(?={stops}))"

    @property
    def pattern(self) -> str:
        """Regex source of a name, the name itself is the only group."""
        return rf"(.+?{self.suffix_pattern}){self.end_pattern}"

    def compile(self, flags: int = 0) -> re.Pattern[str]:
        return re.compile(self.pattern, flags | re.MULTILINE)

    def match(self, text: str, flags: int = 0) -> str | None:
        """Return the owner name at the start of the text, if any."""
        m = self.compile(flags).match(text)
        return m.group(1) if m else None


def split_owners(span: str) -> list[str]:
    """Split a name span into the names of its co-owners."""
    names = (name.strip() for name in OWNER_SEPARATOR.split(span))
    return [name for name in names if name]


def split_marks(run: str) -> list[str]:
    """Split a run of copyright marks like ``℗ & ©`` into single marks."""
    marks = (mark.strip() for mark in MARK_SEPARATOR.split(run))
    return [mark for mark in marks if mark]
