from __future__ import annotations

import pytest

from umli.errors import ParseError
from umli.parser import parse, split_label

REFERENCE_INPUT = """
title  Facilities editing
life A  SL App
life B  Core Permissions API
life C  SL Admin API | edit_facilities | endpoint

full AC  edit_facilities( | payload, user_token)
full CB  get_user_permissions( | token)
dash BC  permissions_list
stop B
self C   [has EDIT_FACILITIES permission] | store changes etc
dash CA  status_ok, payload
"""


def parse_error(text: str) -> ParseError:
    with pytest.raises(ParseError) as exc:
        parse(text)
    return exc.value


# ============================================================================
# Valid input
# ============================================================================


class TestParseReferenceInput:
    def test_statement_count_ignores_blank_lines(self):
        assert len(parse(REFERENCE_INPUT).statements) == 10

    def test_keywords_in_order(self):
        keywords = [s.keyword for s in parse(REFERENCE_INPUT).statements]
        assert keywords == [
            "title", "life", "life", "life",
            "full", "full", "dash", "stop", "self", "dash",
        ]

    def test_title(self):
        assert parse(REFERENCE_INPUT).title() == ["Facilities editing"]

    def test_lifelines(self):
        model = parse(REFERENCE_INPUT)
        names = [s.lifeline_name for s in model.lifeline_statements()]
        assert names == ["A", "B", "C"]
        assert model.lifeline_statement_by_name("C").label_segments == [
            "SL Admin API", "edit_facilities", "endpoint",
        ]

    def test_interaction(self):
        s = parse(REFERENCE_INPUT).statements[4]
        assert s.referenced_lifelines == ["A", "C"]
        assert s.label_segments == ["edit_facilities(", "payload, user_token)"]

    def test_stop_has_no_label(self):
        s = parse(REFERENCE_INPUT).statements[7]
        assert s.referenced_lifelines == ["B"]
        assert s.label_segments == []

    def test_self(self):
        s = parse(REFERENCE_INPUT).statements[8]
        assert s.keyword == "self"
        assert s.referenced_lifelines == ["C"]
        assert s.label_segments == ["[has EDIT_FACILITIES permission]", "store changes etc"]


class TestParseOptions:
    def test_textsize(self):
        model = parse("textsize 12")
        assert model.size_from_text_statement() == 12.0

    def test_fractional_textsize(self):
        assert parse("textsize 7.5").size_from_text_statement() == 7.5

    def test_textsize_defaults_to_none(self):
        assert parse("life A a").size_from_text_statement() is None

    def test_showletters_false(self):
        assert parse("showletters false").lifeline_letters_suppressed()

    def test_showletters_true(self):
        assert not parse("showletters TRUE").lifeline_letters_suppressed()

    def test_empty_input(self):
        assert parse("").statements == []
        assert parse("\n   \n").statements == []


class TestSplitLabel:
    def test_single_row(self):
        assert split_label("hello world") == ["hello world"]

    def test_rows_are_trimmed(self):
        assert split_label(" a |b  | c ") == ["a", "b", "c"]

    def test_empty_row_is_kept(self):
        assert split_label("a||b") == ["a", "", "b"]


# ============================================================================
# Errors
# ============================================================================


class TestParseErrors:
    @pytest.mark.parametrize(
        "text, reason",
        [
            ("life", "must have at least 2 words"),
            ("foo A bar", "unrecognized keyword: foo"),
            ("life AB foo", "Lane name must be single, upper case letter"),
            ("life a foo", "Lane name must be single, upper case letter"),
            ("life A", "Label text missing"),
            ("life A foo\nlife A bar", "Lifeline already declared: A"),
            ("life A foo\nfull A bar", "Lifelines specified must be two, upper case letters"),
            ("life A foo\nfull Ab bar", "Lifelines specified must be two, upper case letters"),
            ("life A foo\nfull AA bar", "Lifelines specified must differ, use self instead"),
            ("life A foo\nfull AB bar", "Unknown lane: B"),
            ("life A foo\nlife B foo\nfull AB", "Label text missing"),
            ("life A foo\nself A", "Label text missing"),
            ("stop B", "Unknown lane: B"),
            ("textsize 4", "textsize must be a number between 5 and 20"),
            ("textsize 21", "textsize must be a number between 5 and 20"),
            ("textsize big", "textsize must be a number between 5 and 20"),
            ("showletters maybe", "showletters must be true or false"),
        ],
    )
    def test_reason(self, text, reason):
        assert parse_error(text).reason == reason

    def test_message_names_the_line_and_its_number(self):
        err = parse_error("life A foo\n\nfull AB bar")
        assert err.line == "full AB bar"
        assert err.line_number == 3
        assert str(err) == "Error on this line <full AB bar> (line: 3): Unknown lane: B"

    def test_lifelines_must_be_declared_before_use(self):
        err = parse_error("full AB bar\nlife A a\nlife B b")
        assert err.line_number == 1

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse("nonsense here")
