"""Tests for the per-line lexical highlighter.

Overlaps are settled by position and length only: the earliest start wins,
then the longest match, then scan order (keywords first, then structural
patterns in registration order).
"""

import logging

import pytest

from lumenmark import ParseConfig, classify, classify_lines, find_spans, parse_config_context
from lumenmark.highlighting import (
    KEYWORDS,
    LanguageFamily,
    LexicalHighlighter,
    is_known_language,
    resolve_family,
)
from lumenmark.spans import LiteralRun, TokenCategory, TokenSpan, reconstruct

KW = TokenCategory.KEYWORD
STR = TokenCategory.STRING
NUM = TokenCategory.NUMBER
COMMENT = TokenCategory.COMMENT
CALL = TokenCategory.FUNCTION_CALL
OP = TokenCategory.OPERATOR
CLASS = TokenCategory.CLASS_NAME
TAG = TokenCategory.TAG


def spans(line: str, language: str | None) -> list[tuple[str, TokenCategory]]:
    return [(span.text, span.category) for span in find_spans(line, language)]


class TestTieBreaking:
    """Equal and overlapping candidates."""

    def test_keyword_beats_call_on_equal_range(self) -> None:
        assert spans("append(xs, 1)", "go") == [("append", KW), ("1", NUM)]

    def test_longer_call_beats_keyword(self) -> None:
        """Whitespace before the paren makes the call match longer."""
        assert spans("len (xs)", "go") == [("len ", CALL)]

    def test_capitalized_keyword_beats_class_name(self) -> None:
        assert spans("None", "python") == [("None", KW)]

    def test_call_beats_class_name(self) -> None:
        assert spans("new Map()", "js") == [("new", KW), ("Map", CALL)]

    def test_earlier_start_wins(self) -> None:
        assert spans("<Button />", "tsx") == [("<Button", TAG), ("/>", OP)]

    def test_string_swallows_template_interpolation(self) -> None:
        assert spans("`${name}`", "js") == [("`${name}`", STR)]

    def test_comment_beats_operator(self) -> None:
        assert spans("x = 1 // note", "js") == [("=", OP), ("1", NUM), ("// note", COMMENT)]


class TestCategories:
    """One example per category."""

    def test_python_definition(self) -> None:
        assert spans("def foo(self):", "py") == [
            ("def", KW),
            ("foo", CALL),
            ("self", KW),
            (":", OP),
        ]

    def test_string_with_escaped_quotes(self) -> None:
        line = 'say("a \\"b\\" c")'
        assert find_spans(line, "python") == [
            TokenSpan(0, 3, CALL, "say"),
            TokenSpan(4, 15, STR, '"a \\"b\\" c"'),
        ]

    def test_numbers(self) -> None:
        found = spans("0x1F 0b101 0o17 3.14 42", "c")
        assert found == [("0x1F", NUM), ("0b101", NUM), ("0o17", NUM), ("3.14", NUM), ("42", NUM)]

    def test_hash_comment(self) -> None:
        assert spans("# heading", "python") == [("# heading", COMMENT)]

    def test_preprocessor_line_is_comment(self) -> None:
        assert spans("#include <stdio.h>", "c") == [("#include <stdio.h>", COMMENT)]

    def test_block_comment_on_one_line(self) -> None:
        assert spans("a /* b */ c", "c") == [("/* b */", COMMENT)]

    def test_class_name(self) -> None:
        assert ("Record", CLASS) in spans("const a: Record = b", "typescript")

    def test_spread_operator(self) -> None:
        assert spans("f(...args)", "js") == [("f", CALL), ("...", OP)]

    def test_tag(self) -> None:
        assert spans("<div>", "jsx") == [("<div", TAG), (">", OP)]

    def test_empty_line(self) -> None:
        assert classify("", "js") == []


class TestLanguageFamilies:
    """Keyword sets per family and alias resolution."""

    def test_rust_keyword(self) -> None:
        assert spans("fn main", "rust") == [("fn", KW)]

    def test_keyword_is_family_specific(self) -> None:
        assert spans("fn main", "js") == []

    def test_typescript_extends_c_family(self) -> None:
        assert KEYWORDS[LanguageFamily.C] < KEYWORDS[LanguageFamily.TYPESCRIPT]
        assert spans("interface A", "ts")[0] == ("interface", KW)
        assert spans("interface a", "js") == []

    @pytest.mark.parametrize(
        "language,family",
        [
            ("js", LanguageFamily.C),
            ("JavaScript", LanguageFamily.C),
            ("TSX", LanguageFamily.TYPESCRIPT),
            ("py", LanguageFamily.PYTHON),
            ("golang", LanguageFamily.GO),
            ("rs", LanguageFamily.RUST),
            ("brainfuck", LanguageFamily.C),
            ("", LanguageFamily.C),
            (None, LanguageFamily.C),
        ],
    )
    def test_resolve_family(self, language: str | None, family: LanguageFamily) -> None:
        assert resolve_family(language) is family

    def test_unknown_language_uses_default_family(self) -> None:
        assert classify("function x", "brainfuck") == classify("function x", "js")

    def test_is_known_language(self) -> None:
        assert is_known_language("Rust")
        assert not is_known_language("cobol")
        assert not is_known_language(None)


class TestClassify:
    """Gap filling and multi-line input."""

    def test_gap_fill(self) -> None:
        assert classify("return x", "py") == [
            TokenSpan(0, 6, KW, "return"),
            LiteralRun(6, 8, " x"),
        ]

    def test_literal_only_line(self) -> None:
        assert classify("hello world", "js") == [LiteralRun(0, 11, "hello world")]

    def test_lines_classified_independently(self) -> None:
        lines = classify_lines("const a = 1\nreturn a", "js")
        assert len(lines) == 2
        assert lines[1][0] == TokenSpan(0, 6, KW, "return")

    def test_block_comment_across_lines_not_recognized(self) -> None:
        lines = classify_lines("/* start\nmiddle */", "c")
        categories = [seg.category for line in lines for seg in line if isinstance(seg, TokenSpan)]
        assert COMMENT not in categories
        assert categories == [OP, OP]

    def test_unknown_language_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lumenmark"):
            classify_lines("x", "cobol")
        assert any("cobol" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize(
        "line",
        [
            'const s = `hi ${name}`; // done',
            "fn main() -> Result<(), Box<dyn Error>> {",
            "if x is not None and y: print(f'{x}')",
            "\t\t  weird \\ 'unterminated",
        ],
    )
    def test_reconstruction(self, line: str) -> None:
        assert reconstruct(classify(line, "ts")) == line


class TestCustomHighlighter:
    """Highlighters built with custom keyword sets."""

    def test_custom_keywords(self) -> None:
        highlighter = LexicalHighlighter({LanguageFamily.C: ["foo"]}, {})
        assert highlighter.find_spans("foo bar", "anything") == [TokenSpan(0, 3, KW, "foo")]

    def test_custom_aliases(self) -> None:
        highlighter = LexicalHighlighter(aliases={"snake": LanguageFamily.PYTHON})
        assert highlighter.family_for("SNAKE") is LanguageFamily.PYTHON
        assert highlighter.family_for("py") is LanguageFamily.C

    def test_default_family_must_have_keywords(self) -> None:
        with pytest.raises(ValueError, match="default_family"):
            LexicalHighlighter({LanguageFamily.GO: ["func"]})

    def test_empty_keyword_set_yields_no_keyword_spans(self) -> None:
        highlighter = LexicalHighlighter({LanguageFamily.C: []}, {})
        assert highlighter.find_spans("foo bar", "c") == []
        assert highlighter.classify("foo bar", "c") == [LiteralRun(0, 7, "foo bar")]

    def test_empty_word_ignored(self) -> None:
        highlighter = LexicalHighlighter({LanguageFamily.C: ["", "foo"]}, {})
        found = highlighter.find_spans("foo bar", "c")
        assert found == [TokenSpan(0, 3, KW, "foo")]
        assert all(span.end > span.start for span in found)

    def test_empty_keyword_set_under_invariant_checks(self) -> None:
        highlighter = LexicalHighlighter({LanguageFamily.C: [""]}, {})
        with parse_config_context(ParseConfig(check_invariants=True)):
            assert reconstruct(highlighter.classify("a b(c)", "c")) == "a b(c)"


class TestUnicodeWhitespace:
    """Whitespace is Unicode-aware; identifiers and digits stay ASCII."""

    def test_call_with_no_break_space(self) -> None:
        assert spans("foo\u00a0(x)", "js") == [("foo\u00a0", CALL)]

    def test_non_ascii_identifier_not_a_call(self) -> None:
        assert spans("caf\u00e9(x)", "js") == []
