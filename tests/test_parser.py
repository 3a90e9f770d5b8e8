"""Tests for the _headers line classifier and parser."""

from __future__ import annotations

import pytest

from edgeheaders.headers.errors import (
    BadSyntaxError,
    HeadersParseError,
    UnableToInferIndentationError,
    UnexpectedIndentationError,
)
from edgeheaders.headers.models import Blank, Comment, Directive, HeadersDocument, PathBlock
from edgeheaders.headers.parser import LineKind, classify_line, parse_headers


# ── classify_line ────────────────────────────────────────────────────────


class TestClassifyLine:
    def test_empty_line_is_blank(self):
        assert classify_line("").kind is LineKind.blank

    def test_whitespace_only_is_blank(self):
        assert classify_line("   \t").kind is LineKind.blank

    def test_comment(self):
        shape = classify_line("# hello")
        assert shape.kind is LineKind.comment
        assert shape.indent == ""
        assert shape.text == "# hello"

    def test_indented_comment_captures_indent(self):
        shape = classify_line("\t# nested")
        assert shape.kind is LineKind.comment
        assert shape.indent == "\t"
        assert shape.text == "# nested"

    def test_directive(self):
        shape = classify_line("  X-Frame-Options: DENY")
        assert shape.kind is LineKind.directive
        assert shape.indent == "  "
        assert shape.name == "X-Frame-Options"
        assert shape.value == "DENY"

    def test_directive_value_keeps_colons_and_semicolons(self):
        shape = classify_line("  content-security-policy: default-src 'self'; img-src https:")
        assert shape.name == "content-security-policy"
        assert shape.value == "default-src 'self'; img-src https:"

    def test_directive_separator_captured(self):
        shape = classify_line("  x-frame :DENY")
        assert shape.name == "x-frame"
        assert shape.separator == " :"
        assert shape.value == "DENY"

    def test_directive_name_with_underscore_and_digits(self):
        shape = classify_line("  x_custom-2: on")
        assert shape.kind is LineKind.directive
        assert shape.name == "x_custom-2"

    def test_path(self):
        shape = classify_line("/blog/*")
        assert shape.kind is LineKind.path
        assert shape.text == "/blog/*"

    def test_path_with_colon_is_not_directive(self):
        assert classify_line("/a:b").kind is LineKind.path

    def test_indented_garbage(self):
        assert classify_line("  /nested").kind is LineKind.indented

    def test_other(self):
        assert classify_line("not a header line").kind is LineKind.other


# ── parse_headers ────────────────────────────────────────────────────────


class TestParseHeaders:
    def test_scenario_a(self, scenario_a_text):
        doc = parse_headers(scenario_a_text)
        assert doc.indent_unit == "  "
        assert doc.entries == [
            PathBlock("/a", [
                Directive("x-frame", "DENY"),
                Directive("x-content-type", "nosniff"),
            ]),
            Blank(),
            PathBlock("/b", [Directive("x-frame", "SAMEORIGIN")]),
        ]

    def test_empty_text(self):
        doc = parse_headers("")
        assert doc.entries == []
        assert doc.indent_unit == "\t"

    def test_comments_and_blanks_only_default_to_tab(self):
        doc = parse_headers("# one\n\n# two\n")
        assert doc.entries == [Comment("# one"), Blank(), Comment("# two")]
        assert doc.indent_unit == "\t"

    def test_tab_indentation_inferred(self):
        doc = parse_headers("/a\n\tx-frame: DENY\n")
        assert doc.indent_unit == "\t"

    def test_nested_comment(self):
        doc = parse_headers("/a\n  # why\n  x-frame: DENY\n")
        assert doc.blocks[0].entries == [Comment("# why"), Directive("x-frame", "DENY")]

    def test_block_of_only_comments_is_accepted(self):
        doc = parse_headers("/a\n  # placeholder\n")
        assert doc.blocks[0].entries == [Comment("# placeholder")]

    def test_top_level_comment_closes_block(self):
        doc = parse_headers("/a\n  x: 1\n# next\n/b\n  y: 2\n")
        assert doc.entries == [
            PathBlock("/a", [Directive("x", "1")]),
            Comment("# next"),
            PathBlock("/b", [Directive("y", "2")]),
        ]

    def test_consecutive_blocks_without_blank(self):
        doc = parse_headers("/a\n  x: 1\n/b\n  y: 2\n")
        assert [b.path for b in doc.blocks] == ["/a", "/b"]
        assert len(doc.entries) == 2

    def test_single_trailing_blank_dropped(self):
        doc = parse_headers("/a\n  x: 1\n\n")
        assert doc.entries == [PathBlock("/a", [Directive("x", "1")])]

    def test_only_last_trailing_blank_dropped(self):
        doc = parse_headers("/a\n  x: 1\n\n\n")
        assert doc.entries[-1] == Blank()
        assert len(doc.entries) == 2

    def test_separator_ignored_in_equality(self):
        assert parse_headers("/a\n  x:1\n") == parse_headers("/a\n  x: 1\n")

    def test_crlf_line_endings(self):
        doc = parse_headers("/a\r\n  x: 1\r\n")
        assert doc.blocks[0].entries == [Directive("x", "1")]

    def test_missing_final_newline(self):
        doc = parse_headers("/a\n  x: 1")
        assert doc.blocks[0].entries == [Directive("x", "1")]

    def test_block_directives_skip_comments(self):
        doc = parse_headers("/a\n  # note\n  x-frame: DENY\n")
        assert doc.blocks[0].directives == [Directive("x-frame", "DENY")]


class TestParseHeadersIndentation:
    def test_inconsistent_indentation_rejected(self):
        with pytest.raises(UnexpectedIndentationError) as exc_info:
            parse_headers("/a\n  x: 1\n/b\n\ty: 2\n")
        assert exc_info.value.line_number == 4

    def test_inconsistent_indentation_within_block(self):
        with pytest.raises(UnexpectedIndentationError):
            parse_headers("/a\n  x: 1\n    y: 2\n")

    def test_indentation_at_top_level(self):
        with pytest.raises(UnexpectedIndentationError) as exc_info:
            parse_headers("  x: 1\n")
        assert exc_info.value.line_number == 1

    def test_indented_comment_at_top_level(self):
        with pytest.raises(UnexpectedIndentationError):
            parse_headers("# ok\n  # not ok\n")

    def test_indented_line_after_blank(self):
        with pytest.raises(UnexpectedIndentationError) as exc_info:
            parse_headers("/a\n  x: 1\n\n  y: 2\n")
        assert exc_info.value.line_number == 4

    def test_first_block_line_not_indented(self):
        with pytest.raises(UnableToInferIndentationError) as exc_info:
            parse_headers("/a\nx-frame: DENY\n")
        assert exc_info.value.line_number == 2

    def test_first_block_comment_not_indented(self):
        with pytest.raises(UnableToInferIndentationError):
            parse_headers("/a\n# comment\n")


class TestParseHeadersSyntax:
    def test_empty_block_followed_by_path(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("/a\n/b\n  x: 1\n")
        assert exc_info.value.line_number == 2

    def test_empty_block_followed_by_blank(self):
        with pytest.raises(BadSyntaxError):
            parse_headers("/a\n\n/b\n  x: 1\n")

    def test_empty_block_after_established_indent(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("/a\n  x: 1\n/b\n# dedented\n")
        assert exc_info.value.line_number == 4

    def test_empty_block_at_end_of_input(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("/a\n")
        assert exc_info.value.line_number == 1
        assert exc_info.value.line == "/a"

    def test_empty_trailing_block_after_valid_block(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("/a\n  x: 1\n/b\n")
        assert exc_info.value.line_number == 3

    def test_directive_at_top_level(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("x-frame: DENY\n")
        assert exc_info.value.line_number == 1

    def test_garbage_at_top_level(self):
        with pytest.raises(BadSyntaxError):
            parse_headers("hello world\n")

    def test_garbage_inside_block_closes_it(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("/a\n  x: 1\nnot a directive\n")
        assert exc_info.value.line_number == 3

    def test_error_message_names_line(self):
        with pytest.raises(HeadersParseError) as exc_info:
            parse_headers("# ok\nbogus\n")
        assert str(exc_info.value) == "Bad syntax at line 2: 'bogus'"
        assert exc_info.value.code == "bad_syntax"

    def test_empty_block_message_keeps_error_kind(self):
        with pytest.raises(BadSyntaxError) as exc_info:
            parse_headers("/a\n/b\n  x: 1\n")
        assert str(exc_info.value) == (
            "Bad syntax (path block has no headers) at line 2: '/b'"
        )
        assert exc_info.value.detail == "path block has no headers"


class TestParserIsolation:
    def test_each_call_has_its_own_state(self):
        first = parse_headers("/a\n  x: 1\n")
        second = parse_headers("/a\n\tx: 1\n")
        assert first.indent_unit == "  "
        assert second.indent_unit == "\t"

    def test_result_is_document(self):
        assert isinstance(parse_headers("/a\n  x: 1\n"), HeadersDocument)
