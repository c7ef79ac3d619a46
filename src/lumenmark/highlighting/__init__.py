"""Lexical highlighting for code block lines.

The highlighter emits categories only. Mapping categories to colors is the
job of the code display (see ``lumenmark.renderers``).

Usage:
    >>> from lumenmark.highlighting import classify
    >>> "".join(segment.text for segment in classify("let x = 1;", "rust"))
    'let x = 1;'
"""

from lumenmark.highlighting.keywords import (
    DEFAULT_FAMILY,
    KEYWORDS,
    LANGUAGE_ALIASES,
    LanguageFamily,
    is_known_language,
    resolve_family,
)
from lumenmark.highlighting.lexical import (
    STRUCTURAL_PATTERNS,
    HighlightSegment,
    LexicalHighlighter,
    StructuralPattern,
    classify,
    classify_lines,
    compile_keywords,
    find_spans,
)

__all__ = [
    "DEFAULT_FAMILY",
    "KEYWORDS",
    "LANGUAGE_ALIASES",
    "STRUCTURAL_PATTERNS",
    "HighlightSegment",
    "LanguageFamily",
    "LexicalHighlighter",
    "StructuralPattern",
    "classify",
    "classify_lines",
    "compile_keywords",
    "find_spans",
    "is_known_language",
    "resolve_family",
]
