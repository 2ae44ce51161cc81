"""Tests for copyright notice parsing.

Tests are organized bottom-up:
  1. transform: search & replace rules
  2. NameBoundary: where owner names end
  3. Splitting: co-owners and mark runs
  4. clean_type: normalized statement types
  5. NoticeParser: both extraction passes
"""

from __future__ import annotations

import re

import pytest

from credit_resolver.parsing import (
    CopyrightStatement,
    NameBoundary,
    NoticeParser,
    clean_type,
    parse_copyright_notice,
    split_marks,
    split_owners,
    transform,
)


# =====================================================================
# 1. transform
# =====================================================================


class TestTransform:
    def test_empty_rules_is_identity(self):
        text = "(P) 2020 «Foo» / Bar"
        assert transform(text, []) == text

    def test_rules_apply_in_sequence(self):
        assert transform("ab", [("a", "b"), ("b", "c")]) == "cc"

    def test_regex_rule_replaces_all_matches(self):
        assert transform("foo boo", [(re.compile("o"), "0")]) == "f00 b00"

    def test_string_rule_is_literal_and_global(self):
        assert transform("a.b.c", [(".", "-")]) == "a-b-c"

    def test_backreferences(self):
        rule = (re.compile(r"«(.+?)»"), r"\1")
        assert transform("© «Foo» and «Bar»", [rule]) == "© Foo and Bar"

    def test_callable_replacement(self):
        assert transform("xax", [("x", lambda m: m.group(0).upper())]) == "XaX"

    def test_rule_is_not_reapplied(self):
        assert transform("aa", [(re.compile("a"), "aa")]) == "aaaa"


# =====================================================================
# 2. NameBoundary
# =====================================================================


class TestNameBoundary:
    @pytest.fixture
    def boundary(self):
        return NameBoundary()

    def test_stops_at_comma(self, boundary):
        assert boundary.match("Foo Records, all rights reserved") == "Foo Records"

    def test_stops_at_period(self, boundary):
        assert boundary.match("Foo Records. Made in EU") == "Foo Records"

    def test_stops_before_under(self, boundary):
        assert boundary.match("Foo Records under exclusive license") == "Foo Records"

    def test_runs_to_end_of_line(self, boundary):
        assert boundary.match("Foo Records\nBar") == "Foo Records"

    def test_abbreviated_suffix_keeps_period(self, boundary):
        assert boundary.match("Foo Ltd. and others") == "Foo Ltd."

    def test_suffix_after_comma(self, boundary):
        assert boundary.match("Acme Holdings, Inc. All rights reserved") == "Acme Holdings, Inc."

    def test_suffix_without_period(self, boundary):
        assert boundary.match("Foo LLC under license") == "Foo LLC"

    def test_legal_suffix_drops_trailing_period(self, boundary):
        assert boundary.match("Foo LLC. All rights reserved") == "Foo LLC"
        assert parse_copyright_notice("© 2020 Foo LLC.")[0].name == "Foo LLC"

    def test_empty_text_has_no_name(self, boundary):
        assert boundary.match("") is None

    def test_stop_sequences_are_configurable(self):
        commas_only = NameBoundary(stop_sequences=(",",))
        assert commas_only.match("Foo. Bar, Baz") == "Foo."
        assert NameBoundary().match("Foo. Bar, Baz") == "Foo"

    def test_suffixes_are_configurable(self):
        boundary = NameBoundary(legal_suffixes=("GmbH",), abbreviated_suffixes=())
        assert boundary.match("Foo, GmbH, Berlin") == "Foo, GmbH"
        assert "Ltd" not in boundary.suffix_pattern

    def test_pattern_has_single_group(self, boundary):
        assert re.compile(boundary.pattern).groups == 1


# =====================================================================
# 3. Splitting
# =====================================================================


class TestSplitting:
    def test_split_owners_on_slash_before_word(self):
        assert split_owners("Foo/Bar Records") == ["Foo", "Bar Records"]

    def test_split_owners_on_slash_before_whitespace(self):
        assert split_owners("Foo Records / Bar Music") == ["Foo Records", "Bar Music"]

    def test_split_owners_on_single_letter_word(self):
        assert split_owners("A/B Records") == ["A", "B Records"]

    def test_keeps_abbreviation_at_end(self):
        assert split_owners("Foo Music A/S") == ["Foo Music A/S"]

    def test_drops_empty_names(self):
        assert split_owners("Foo / ") == ["Foo"]

    def test_split_marks_on_ampersand(self):
        assert split_marks("℗&©") == ["℗", "©"]

    def test_split_marks_on_plus_with_spaces(self):
        assert split_marks("℗ + ©") == ["℗", "©"]

    def test_split_adjacent_marks(self):
        assert split_marks("©℗") == ["©", "℗"]

    def test_single_mark(self):
        assert split_marks("©") == ["©"]


# =====================================================================
# 4. clean_type
# =====================================================================


class TestCleanType:
    def test_mark_is_unchanged(self):
        assert clean_type(" © ") == ("©", None)

    def test_licensed_to(self):
        assert clean_type("Licensed to") == ("licensed", "to")

    def test_licenced_from(self):
        assert clean_type("licenced from") == ("licensed", "from")

    def test_license_to(self):
        assert clean_type("License to") == ("licensed", "to")

    def test_distributed_by_is_lowercased(self):
        assert clean_type("Distributed By") == ("distributed by", None)


# =====================================================================
# 5. NoticeParser
# =====================================================================


class TestNoticeParser:
    def test_simple_copyright(self):
        assert parse_copyright_notice("© 2021 Example Records") == [
            CopyrightStatement(name="Example Records", types=("©",), year="2021"),
        ]

    def test_copyright_inside_longer_text(self):
        result = parse_copyright_notice("Artwork by X. © 2021 Example Records")
        assert result == [CopyrightStatement("Example Records", ("©",), "2021")]

    def test_combined_marks_and_co_owners(self):
        result = parse_copyright_notice("℗&© 2020 A/B Records")
        assert result == [
            CopyrightStatement("A", ("℗", "©"), "2020"),
            CopyrightStatement("B Records", ("℗", "©"), "2020"),
        ]

    def test_licensed_to_without_mark(self):
        result = parse_copyright_notice("licensed to Foo Ltd.")
        assert len(result) == 1
        statement = result[0]
        assert statement.name == "Foo Ltd."
        assert statement.types == ("licensed",)
        assert statement.year is None
        assert statement.direction == "to"

    def test_licensed_from_keeps_direction(self):
        result = parse_copyright_notice("Licensed from Bar Music")
        assert result == [CopyrightStatement("Bar Music", ("licensed",), None, "from")]

    def test_no_match_is_empty(self):
        assert parse_copyright_notice("Recorded at Abbey Road Studios") == []

    def test_parenthesized_marks(self):
        result = parse_copyright_notice("(p) 2019 Foo Music, (c) 2020 Bar Music")
        assert result == [
            CopyrightStatement("Foo Music", ("℗",), "2019"),
            CopyrightStatement("Bar Music", ("©",), "2020"),
        ]

    def test_french_quotes_are_removed(self):
        result = parse_copyright_notice("© 2020 «Foo Records»")
        assert result == [CopyrightStatement("Foo Records", ("©",), "2020")]

    def test_territorial_grant_keeps_rest_of_world(self):
        text = "℗ 2015 Foo Records for the UK and Bar Music for the world outside the UK"
        result = parse_copyright_notice(text)
        assert [s.name for s in result] == ["Foo Records", "Bar Music"]
        assert all(s.types == ("℗",) and s.year == "2015" for s in result)

    def test_mark_before_under_is_dropped(self):
        result = parse_copyright_notice("℗ under license from Foo Records")
        assert result == [CopyrightStatement("Foo Records", ("licensed",), None, "from")]

    def test_both_passes_on_one_line(self):
        text = "(P) 2019 Foo Music, under exclusive license to Bar Records Ltd"
        result = parse_copyright_notice(text)
        assert result == [
            CopyrightStatement("Foo Music", ("℗",), "2019"),
            CopyrightStatement("Bar Records Ltd", ("licensed",), None, "to"),
        ]

    def test_legal_info_comes_after_copyrights(self):
        result = parse_copyright_notice("Distributed by Foo. © 2020 Bar")
        assert result == [
            CopyrightStatement("Bar", ("©",), "2020"),
            CopyrightStatement("Foo", ("distributed by",)),
        ]

    def test_marketed_by_with_legal_suffix(self):
        result = parse_copyright_notice("© 2020 Foo Records, marketed by Bar Ltd")
        assert result[1] == CopyrightStatement("Bar Ltd", ("marketed by",))

    def test_adjacent_marks(self):
        result = parse_copyright_notice("©℗ 2001 Foo")
        assert result == [CopyrightStatement("Foo", ("©", "℗"), "2001")]

    def test_duplicate_marks_form_an_ordered_set(self):
        result = parse_copyright_notice("© & © 1999 Foo")
        assert result[0].types == ("©",)

    def test_malformed_year_is_absent(self):
        result = parse_copyright_notice("© 99 Foo Records")
        assert result == [CopyrightStatement("99 Foo Records", ("©",), None)]

    def test_year_is_optional(self):
        assert parse_copyright_notice("© Foo Records") == [
            CopyrightStatement("Foo Records", ("©",)),
        ]

    def test_each_line_is_parsed_separately(self):
        result = parse_copyright_notice("© 2020 Foo\n℗ 2021 Bar")
        assert [(s.name, s.year) for s in result] == [("Foo", "2020"), ("Bar", "2021")]

    def test_duplicates_are_kept(self):
        result = parse_copyright_notice("© 2020 Foo, © 2020 Foo")
        assert len(result) == 2
        assert result[0] == result[1]

    def test_custom_boundary_is_shared_by_both_passes(self):
        parser = NoticeParser(NameBoundary(stop_sequences=(",",)))
        result = parser.parse("© 2020 Foo Inc. Music, distributed by St. Bar, Baz")
        assert [s.name for s in result] == ["Foo Inc.", "St."]

    def test_to_dict_omits_absent_fields(self):
        statement = CopyrightStatement("Foo", ("©",))
        assert statement.to_dict() == {"name": "Foo", "types": ["©"]}
