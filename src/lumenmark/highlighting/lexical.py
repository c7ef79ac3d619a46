"""Per-line lexical highlighter.

Presentation-only classification of a code line into token categories. Not a
lexer: no error recovery, no state across lines. A block comment or string
that spans lines is classified line by line, each line on its own.

Algorithm:
1. Scan the line for the family's keywords.
2. Scan with every structural pattern (comments, strings, template
   interpolation, numbers, call sites, tags, capitalized names, operators).
3. Sort all matches by start, longer first on ties. The sort is stable, so
   equal ranges keep scan order: keyword first, then structural patterns in
   registration order.
4. Sweep left to right, keeping a match only if it starts at or after the
   end of the last kept match.
5. Fill the gaps with literal runs.

Category never decides an overlap; position and length do.

Thread Safety:
LexicalHighlighter compiles its patterns once at construction and never
mutates them. classify() keeps all state in locals.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lumenmark.config import get_parse_config
from lumenmark.highlighting.keywords import (
    DEFAULT_FAMILY,
    KEYWORDS,
    LANGUAGE_ALIASES,
    LanguageFamily,
)
from lumenmark.spans import LiteralRun, TokenCategory, TokenSpan, check_segments
from lumenmark.utils.logger import get_logger

logger = get_logger(__name__)

HighlightSegment = TokenSpan | LiteralRun


@dataclass(frozen=True, slots=True)
class StructuralPattern:
    """A language-independent pattern and the category it assigns."""

    category: TokenCategory
    pattern: re.Pattern[str]


# Registration order breaks ties between equal-length matches at one offset
STRUCTURAL_PATTERNS: tuple[StructuralPattern, ...] = (
    StructuralPattern(
        TokenCategory.COMMENT,
        re.compile(r"//.*$|/\*[\s\S]*?\*/|#.*$", re.MULTILINE | re.ASCII),
    ),
    StructuralPattern(
        TokenCategory.STRING,
        re.compile(r"""(['"`])(?:(?!\1)[^\\]|\\.)*\1""", re.ASCII),
    ),
    # ${expr} inside template literals
    StructuralPattern(TokenCategory.OPERATOR, re.compile(r"\$\{[^}]+\}", re.ASCII)),
    StructuralPattern(
        TokenCategory.NUMBER,
        re.compile(r"\b(?:\d+\.?\d*|0x[a-fA-F0-9]+|0b[01]+|0o[0-7]+)\b", re.ASCII),
    ),
    # ASCII identifier before "(", trailing (Unicode) whitespace included, paren excluded
    StructuralPattern(
        TokenCategory.FUNCTION_CALL,
        re.compile(r"(?<![A-Za-z0-9_])[a-zA-Z_][A-Za-z0-9_]*\s*(?=\()"),
    ),
    StructuralPattern(TokenCategory.TAG, re.compile(r"</?[a-zA-Z][a-zA-Z0-9]*", re.ASCII)),
    StructuralPattern(TokenCategory.CLASS_NAME, re.compile(r"\b[A-Z][a-zA-Z0-9]*\b", re.ASCII)),
    StructuralPattern(TokenCategory.OPERATOR, re.compile(r"[+\-*/%=<>!&|^~?:]+|\.{3}", re.ASCII)),
)

_NEVER_MATCHES = re.compile(r"(?!)")


def compile_keywords(words: Iterable[str]) -> re.Pattern[str]:
    """Build a whole-word alternation for ``words``.

    Empty words are skipped; a set with no words compiles to a pattern that
    never matches.
    """
    ordered = sorted({word for word in words if word}, key=lambda w: (-len(w), w))
    if not ordered:
        return _NEVER_MATCHES
    alternation = "|".join(re.escape(word) for word in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.ASCII)


class LexicalHighlighter:
    """Classify code lines into token categories.

    Usage:
        >>> highlighter = LexicalHighlighter()
        >>> [(s.text, s.category.value) for s in highlighter.find_spans("x = 42", "js")]
        [('=', 'operator'), ('42', 'number')]

    """

    __slots__ = ("_aliases", "_default_family", "_keyword_patterns", "_structural")

    def __init__(
        self,
        keyword_sets: Mapping[LanguageFamily, Iterable[str]] = KEYWORDS,
        aliases: Mapping[str, LanguageFamily] = LANGUAGE_ALIASES,
        *,
        default_family: LanguageFamily = DEFAULT_FAMILY,
        structural_patterns: Iterable[StructuralPattern] = STRUCTURAL_PATTERNS,
    ) -> None:
        """Initialize highlighter.

        Args:
            keyword_sets: Keyword list per language family
            aliases: Lowercase language name to family
            default_family: Family for unknown languages; must be present in
                ``keyword_sets``
            structural_patterns: Patterns applied to every language, in
                tie-break order
        """
        if default_family not in keyword_sets:
            msg = f"default_family {default_family!r} has no keyword set"
            raise ValueError(msg)
        self._keyword_patterns = MappingProxyType(
            {family: compile_keywords(words) for family, words in keyword_sets.items()}
        )
        self._aliases = MappingProxyType({name.lower(): family for name, family in aliases.items()})
        self._default_family = default_family
        self._structural = tuple(structural_patterns)

    def family_for(self, language: str | None) -> LanguageFamily:
        """Resolve a language to a family that has a keyword set."""
        if language:
            family = self._aliases.get(language.strip().lower())
            if family is not None and family in self._keyword_patterns:
                return family
        return self._default_family

    def find_spans(self, line: str, language: str | None) -> list[TokenSpan]:
        """Accepted classified spans for ``line``, without gap fills."""
        keyword_pattern = self._keyword_patterns[self.family_for(language)]

        candidates: list[tuple[int, int, TokenCategory]] = [
            (match.start(), match.end(), TokenCategory.KEYWORD)
            for match in keyword_pattern.finditer(line)
            if match.end() > match.start()
        ]
        for structural in self._structural:
            candidates.extend(
                (match.start(), match.end(), structural.category)
                for match in structural.pattern.finditer(line)
                if match.end() > match.start()
            )

        # Stable: equal (start, end) keep scan order
        candidates.sort(key=lambda c: (c[0], -c[1]))

        accepted: list[TokenSpan] = []
        last_end = 0
        for start, end, category in candidates:
            if start >= last_end:
                accepted.append(TokenSpan(start, end, category, line[start:end]))
                last_end = end
        return accepted

    def classify(self, line: str, language: str | None) -> list[HighlightSegment]:
        """Classify one line into spans and literal gap runs.

        Concatenating the ``text`` of the result reproduces ``line``.
        """
        segments: list[HighlightSegment] = []
        cursor = 0
        for span in self.find_spans(line, language):
            if span.start > cursor:
                segments.append(LiteralRun(cursor, span.start, line[cursor : span.start]))
            segments.append(span)
            cursor = span.end
        if cursor < len(line):
            segments.append(LiteralRun(cursor, len(line), line[cursor:]))

        if get_parse_config().check_invariants:
            check_segments(segments, line, "highlight")
        return segments

    def classify_lines(self, code: str, language: str | None) -> list[list[HighlightSegment]]:
        """Classify each line of ``code`` independently."""
        if language and language.strip().lower() not in self._aliases:
            logger.debug("No keyword set for language %r, using %s", language, self._default_family.value)
        return [self.classify(line, language) for line in code.split("\n")]


_DEFAULT_HIGHLIGHTER = LexicalHighlighter()


def classify(line: str, language: str | None) -> list[HighlightSegment]:
    """Classify ``line`` with the default highlighter.

    Example:
        >>> [(s.text, getattr(s, "category", None)) for s in classify("return x", "py")]
        [('return', <TokenCategory.KEYWORD: 'keyword'>), (' x', None)]
    """
    return _DEFAULT_HIGHLIGHTER.classify(line, language)


def classify_lines(code: str, language: str | None) -> list[list[HighlightSegment]]:
    """Classify each line of ``code`` with the default highlighter."""
    return _DEFAULT_HIGHLIGHTER.classify_lines(code, language)


def find_spans(line: str, language: str | None) -> list[TokenSpan]:
    """Accepted classified spans for ``line`` with the default highlighter."""
    return _DEFAULT_HIGHLIGHTER.find_spans(line, language)
