"""Tests for the inline span resolver.

Rules run in priority order over literal runs only, so an earlier category
claims its text before later ones see it.
"""

import pytest

from lumenmark import resolve_inline
from lumenmark.inline import (
    BOLD_RULE,
    DEFAULT_RULES,
    INLINE_CODE_RULE,
    InlineResolver,
)
from lumenmark.spans import InlineCategory, InlineSpan, LiteralRun, reconstruct


def shape(text: str) -> list[tuple[str, str]]:
    """(kind, text) pairs, kind being the category value or 'literal'."""
    return [
        (segment.category.value if isinstance(segment, InlineSpan) else "literal", segment.text)
        for segment in resolve_inline(text)
    ]


class TestCategories:
    """Each category on its own."""

    def test_bold_and_italic(self) -> None:
        segments = resolve_inline("**bold** and *italic*")
        assert segments == [
            InlineSpan(0, 8, InlineCategory.BOLD, "**bold**", content="bold"),
            LiteralRun(8, 13, " and "),
            InlineSpan(13, 21, InlineCategory.ITALIC, "*italic*", content="italic"),
        ]

    def test_underscore_delimiters(self) -> None:
        segments = resolve_inline("__b__ _i_")
        assert [s.content for s in segments if isinstance(s, InlineSpan)] == ["b", "i"]
        assert [s.category for s in segments if isinstance(s, InlineSpan)] == [
            InlineCategory.BOLD,
            InlineCategory.ITALIC,
        ]

    def test_strikethrough(self) -> None:
        (span,) = resolve_inline("~~gone~~")
        assert span.category is InlineCategory.STRIKETHROUGH
        assert span.content == "gone"

    def test_inline_code(self) -> None:
        assert shape("run `make test` now") == [
            ("literal", "run "),
            ("inlineCode", "`make test`"),
            ("literal", " now"),
        ]

    def test_link(self) -> None:
        (link,) = resolve_inline("[docs](https://x.dev)")
        assert link.category is InlineCategory.LINK
        assert link.content == "docs"
        assert link.url == "https://x.dev"
        assert link.children == (LiteralRun(1, 5, "docs"),)

    def test_link_destination_not_validated(self) -> None:
        (link,) = resolve_inline("[a](not a url)")
        assert link.url == "not a url"

    def test_several_spans_of_one_category(self) -> None:
        assert shape("**a** **b**") == [
            ("bold", "**a**"),
            ("literal", " "),
            ("bold", "**b**"),
        ]


class TestPriority:
    """Earlier categories win over later ones."""

    def test_emphasis_runs_before_code(self) -> None:
        """Emphasis inside backticks is claimed first; the code span then fails."""
        assert shape("`a*b*c`") == [
            ("literal", "`a"),
            ("italic", "*b*"),
            ("literal", "c`"),
        ]

    def test_bold_inside_strikethrough_blocks_it(self) -> None:
        assert shape("~~**x**~~") == [
            ("literal", "~~"),
            ("bold", "**x**"),
            ("literal", "~~"),
        ]

    def test_underscores_in_identifiers(self) -> None:
        assert shape("snake_case_name") == [
            ("literal", "snake"),
            ("italic", "_case_"),
            ("literal", "name"),
        ]


class TestLinkLabels:
    """Links whose label holds spans from earlier categories."""

    def test_bold_label(self) -> None:
        (link,) = resolve_inline("[**docs**](u)")
        assert link.category is InlineCategory.LINK
        assert link.url == "u"
        assert link.content == "**docs**"
        (child,) = link.children
        assert isinstance(child, InlineSpan)
        assert child.category is InlineCategory.BOLD
        assert child.content == "docs"

    def test_code_label_with_surrounding_text(self) -> None:
        segments = resolve_inline("see [`x`](y) now")
        assert [s.text for s in segments] == ["see ", "[`x`](y)", " now"]
        link = segments[1]
        assert link.category is InlineCategory.LINK
        assert [c.text for c in link.children] == ["`x`"]

    def test_mixed_label(self) -> None:
        link = resolve_inline("see [the **docs**](https://x.dev)")[-1]
        assert link.url == "https://x.dev"
        assert [child.text for child in link.children] == ["the ", "**docs**"]


class TestNoMatch:
    """Text without complete markup stays literal."""

    @pytest.mark.parametrize(
        "text",
        ["plain", "**", "a * b", "[a](b", "`unclosed", "~single~", "**a\nb**"],
    )
    def test_single_literal(self, text: str) -> None:
        assert resolve_inline(text) == [LiteralRun(0, len(text), text)]

    def test_empty(self) -> None:
        assert resolve_inline("") == []


class TestResolver:
    """InlineResolver configuration and single-rule passes."""

    def test_default_rules_order(self) -> None:
        assert [rule.category for rule in DEFAULT_RULES] == list(InlineCategory)
        assert InlineResolver().rules == DEFAULT_RULES

    def test_apply_single_rule(self) -> None:
        resolver = InlineResolver()
        result = resolver.apply(BOLD_RULE, [LiteralRun(0, 9, "a **b** c")])
        assert [s.text for s in result] == ["a ", "**b**", " c"]
        assert [s.start for s in result] == [0, 2, 7]

    def test_apply_passes_spans_through(self) -> None:
        resolver = InlineResolver()
        span = InlineSpan(0, 5, InlineCategory.BOLD, "**b**", content="b")
        result = resolver.apply(INLINE_CODE_RULE, [span, LiteralRun(5, 8, "`c`")])
        assert result[0] is span
        assert result[1].category is InlineCategory.INLINE_CODE

    def test_custom_rules(self) -> None:
        resolver = InlineResolver(rules=(INLINE_CODE_RULE,))
        (span,) = resolver.resolve("`*x*`")
        assert span.category is InlineCategory.INLINE_CODE
        assert span.content == "*x*"

    @pytest.mark.parametrize(
        "text",
        [
            "**bold** and *italic*",
            "see [the **docs**](https://x.dev) and `code` ~~old~~",
            "a_b_c **x*y** [z](w",
        ],
    )
    def test_reconstruction(self, text: str) -> None:
        assert reconstruct(resolve_inline(text)) == text

    def test_repeatable(self) -> None:
        text = "**a** [b](c) `d`"
        assert resolve_inline(text) == resolve_inline(text)
