"""Data types for parsed copyright notices."""

from __future__ import annotations

from dataclasses import dataclass

COPYRIGHT = "©"
PHONOGRAPHIC_COPYRIGHT = "℗"
LICENSED = "licensed"
DISTRIBUTED_BY = "distributed by"
MARKETED_BY = "marketed by"

MARKS = (COPYRIGHT, PHONOGRAPHIC_COPYRIGHT)


@dataclass(frozen=True)
class CopyrightStatement:
    """One piece of copyright or legal information extracted from a notice.

    ``types`` are mapped to relationship types later on. ``year`` is a
    string of exactly four digits or None. ``direction`` is only set for
    licensing statements ("to" or "from").
    """

    name: str
    types: tuple[str, ...]
    year: str | None = None
    direction: str | None = None

    def to_dict(self) -> dict:
        data: dict = {"name": self.name, "types": list(self.types)}
        if self.year is not None:
            data["year"] = self.year
        if self.direction is not None:
            data["direction"] = self.direction
        return data
