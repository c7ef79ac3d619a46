"""Span model shared by the inline resolver and the lexical highlighter.

Both engines turn a string into an ordered, gap-free sequence of segments:
classified ``TokenSpan`` runs interleaved with unclassified ``LiteralRun``
runs. Concatenating the ``text`` of every segment reproduces the input.

Span Hierarchy:
TokenSpan (highlighter output)
└── InlineSpan (inline resolver output, adds captured content and link data)
LiteralRun (unclassified text, both engines)

Thread Safety:
All span types are frozen dataclasses, safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from lumenmark.errors import InvariantError


class InlineCategory(Enum):
    """Inline span categories, in application priority order.

    The order is load-bearing: ``BOLD`` runs before ``ITALIC`` so doubled
    delimiters are consumed before single ones are considered.

    """

    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inlineCode"
    LINK = "link"


class TokenCategory(Enum):
    """Lexical categories emitted by the highlighter."""

    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    FUNCTION_CALL = "functionCall"
    OPERATOR = "operator"
    CLASS_NAME = "className"
    TAG = "tag"


@dataclass(frozen=True, slots=True)
class LiteralRun:
    """Unclassified text between spans, preserved verbatim.

    Attributes:
        start: Offset of the first character in the owning text
        end: Offset one past the last character
        text: ``owning_text[start:end]``

    """

    start: int
    end: int
    text: str


@dataclass(frozen=True, slots=True)
class TokenSpan:
    """A classified run of text.

    Invariant: ``0 <= start < end <= len(owning_text)`` and
    ``text == owning_text[start:end]``.

    """

    start: int
    end: int
    category: InlineCategory | TokenCategory
    text: str


@dataclass(frozen=True, slots=True)
class InlineSpan(TokenSpan):
    """A styled inline span.

    ``text`` is the full matched source including delimiters (``**bold**``);
    ``content`` is the captured inner text (``bold``).

    Links carry the destination in ``url`` and the label in ``children``: the
    label's segments, which may hold spans produced by earlier categories
    (for example a bold span inside ``[**docs**](https://...)``).

    """

    content: str
    url: str | None = None
    children: tuple[InlineSpan | LiteralRun, ...] = ()


Segment = TokenSpan | LiteralRun


def reconstruct(segments: Iterable[Segment]) -> str:
    """Concatenate segment texts in order.

    For any engine output this returns the original input exactly.
    """
    return "".join(segment.text for segment in segments)


def check_segments(segments: Sequence[Segment], text: str, engine: str) -> None:
    """Validate that segments tile ``text`` without gaps or overlaps.

    Args:
        segments: Engine output to validate
        text: The input the segments were produced from
        engine: Engine name used in error messages

    Raises:
        InvariantError: If any span is empty, out of order, overlapping,
            leaves a gap, or disagrees with the source text.
    """
    cursor = 0
    for segment in segments:
        if segment.start != cursor:
            kind = "gap" if segment.start > cursor else "overlap"
            raise InvariantError(engine, f"{kind} before segment {segment!r}", cursor)
        if segment.end <= segment.start:
            raise InvariantError(engine, f"empty segment {segment!r}", segment.start)
        if text[segment.start : segment.end] != segment.text:
            raise InvariantError(engine, "segment text does not match source", segment.start)
        if isinstance(segment, InlineSpan) and segment.children:
            _check_children(segment, text, engine)
        cursor = segment.end
    if cursor != len(text):
        raise InvariantError(engine, "segments stop before end of text", cursor)


def _check_children(span: InlineSpan, text: str, engine: str) -> None:
    """Link label segments must stay inside the link and stay ordered."""
    cursor = span.children[0].start
    for child in span.children:
        if child.start != cursor or not (span.start < child.start < child.end < span.end):
            raise InvariantError(engine, f"bad link label segment {child!r}", child.start)
        if text[child.start : child.end] != child.text:
            raise InvariantError(engine, "label segment text does not match source", child.start)
        cursor = child.end


__all__ = [
    "InlineCategory",
    "InlineSpan",
    "LiteralRun",
    "Segment",
    "TokenCategory",
    "TokenSpan",
    "check_segments",
    "reconstruct",
]
