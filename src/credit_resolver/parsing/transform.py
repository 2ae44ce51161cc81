"""Search & replace based text normalization."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Union

Pattern = Union[str, re.Pattern[str]]
Replacement = Union[str, Callable[[re.Match[str]], str]]
SubstitutionRule = tuple[Pattern, Replacement]


def transform(value: str, substitution_rules: Sequence[SubstitutionRule]) -> str:
    """Transform the given value using the given substitution rules.

    Each rule is applied once to the output of the previous rule and
    replaces all matches. String patterns are matched literally.
    """
    for search_value, replace_value in substitution_rules:
        if isinstance(search_value, str):
            if callable(replace_value):
                search_value = re.compile(re.escape(search_value))
            else:
                value = value.replace(search_value, replace_value)
                continue
        value = search_value.sub(replace_value, value)
    return value
