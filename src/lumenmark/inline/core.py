"""Inline span resolver.

Sequential rewriting over an ordered segment list. The whole text starts as
one literal run; each rule, in priority order, scans only the literal runs
left by the rules before it and splits them into literal-before, span,
literal-after. The segment list is rebuilt after every pass, never mutated.

Links get a second, bridging pass: a link whose label already contains spans
from earlier rules (``[**docs**](https://...)``) is accepted as long as the
opening ``[`` and the ``](url)`` tail lie in literal runs. The label's
segments become the link's children.

Thread Safety:
InlineResolver holds only its immutable rule tuple. resolve() keeps all
state in locals and is safe to call concurrently.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from lumenmark.config import get_parse_config
from lumenmark.inline.rules import DEFAULT_RULES, InlineRule
from lumenmark.spans import InlineCategory, InlineSpan, LiteralRun, check_segments

InlineSegment = InlineSpan | LiteralRun


def _slice(run: LiteralRun, start: int, end: int) -> LiteralRun:
    """Sub-run of ``run`` between absolute offsets."""
    return LiteralRun(start, end, run.text[start - run.start : end - run.start])


class InlineResolver:
    """Resolve one block's raw text into literal runs and styled spans.

    Usage:
        >>> resolver = InlineResolver()
        >>> [s.text for s in resolver.resolve("**bold** and *italic*")]
        ['**bold**', ' and ', '*italic*']

    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[InlineRule] = DEFAULT_RULES) -> None:
        """Initialize resolver.

        Args:
            rules: Rules in priority order; earlier rules claim text first
        """
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[InlineRule, ...]:
        return self._rules

    def resolve(self, text: str) -> list[InlineSegment]:
        """Resolve ``text`` into an ordered, gap-free segment list.

        Concatenating the ``text`` of the returned segments reproduces the
        input exactly. Empty input yields an empty list.
        """
        segments: list[InlineSegment] = [LiteralRun(0, len(text), text)] if text else []
        for rule in self._rules:
            segments = self.apply(rule, segments)
            if rule.category is InlineCategory.LINK:
                segments = self._bridge_links(rule, segments, text)

        if get_parse_config().check_invariants:
            check_segments(segments, text, "inline")
        return segments

    def apply(self, rule: InlineRule, segments: Sequence[InlineSegment]) -> list[InlineSegment]:
        """Run one rule over the literal runs of ``segments``.

        Spans already present pass through untouched.
        """
        result: list[InlineSegment] = []
        for segment in segments:
            if not isinstance(segment, LiteralRun):
                result.append(segment)
                continue

            cursor = 0
            run = segment.text
            for match in rule.pattern.finditer(run):
                if match.end() == match.start():
                    continue
                if match.start() > cursor:
                    result.append(_slice(segment, segment.start + cursor, segment.start + match.start()))
                result.append(self._make_span(rule, match, segment.start))
                cursor = match.end()
            if cursor < len(run):
                result.append(_slice(segment, segment.start + cursor, segment.end))
        return result

    def _make_span(self, rule: InlineRule, match: re.Match[str], offset: int) -> InlineSpan:
        start = offset + match.start()
        end = offset + match.end()
        if rule.category is InlineCategory.LINK:
            label = match.group(1)
            label_start = offset + match.start(1)
            return InlineSpan(
                start,
                end,
                rule.category,
                match.group(0),
                content=label,
                url=match.group(2),
                children=(LiteralRun(label_start, label_start + len(label), label),),
            )
        return InlineSpan(start, end, rule.category, match.group(0), content=rule.content(match))

    def _bridge_links(
        self, rule: InlineRule, segments: list[InlineSegment], text: str
    ) -> list[InlineSegment]:
        """Accept links whose label spans earlier-resolved segments."""
        if all(isinstance(segment, LiteralRun) for segment in segments):
            return segments

        pos = 0
        while (match := rule.pattern.search(text, pos)) is not None:
            spliced = self._splice_link(segments, match)
            if spliced is None:
                pos = match.start() + 1
            else:
                segments = spliced
                pos = match.end()
        return segments

    def _splice_link(
        self, segments: list[InlineSegment], match: re.Match[str]
    ) -> list[InlineSegment] | None:
        """Replace the segments under ``match`` with a link span, if allowed.

        Returns None when the opening bracket or the ``](url)`` tail is not in
        a literal run, or when the whole match already sits in one run.
        """
        start, end = match.start(), match.end()
        label_start, label_end = match.start(1), match.end(1)

        opener_idx = closer_idx = -1
        for idx, segment in enumerate(segments):
            if segment.start <= start < segment.end:
                opener_idx = idx
            if segment.start <= end - 1 < segment.end:
                closer_idx = idx
                break
        if opener_idx < 0 or closer_idx <= opener_idx:
            return None

        opener = segments[opener_idx]
        closer = segments[closer_idx]
        if not isinstance(opener, LiteralRun) or not isinstance(closer, LiteralRun):
            return None
        if closer.start > label_end:
            return None

        children: list[InlineSegment] = []
        if label_start < opener.end:
            children.append(_slice(opener, label_start, opener.end))
        children.extend(segments[opener_idx + 1 : closer_idx])
        if closer.start < label_end:
            children.append(_slice(closer, closer.start, label_end))

        link = InlineSpan(
            start,
            end,
            InlineCategory.LINK,
            match.group(0),
            content=match.group(1),
            url=match.group(2),
            children=tuple(children),
        )

        spliced = segments[:opener_idx]
        if start > opener.start:
            spliced.append(_slice(opener, opener.start, start))
        spliced.append(link)
        if end < closer.end:
            spliced.append(_slice(closer, end, closer.end))
        spliced.extend(segments[closer_idx + 1 :])
        return spliced


_DEFAULT_RESOLVER = InlineResolver()


def resolve_inline(text: str) -> list[InlineSegment]:
    """Resolve ``text`` with the default rules.

    Example:
        >>> segments = resolve_inline("see [the **docs**](https://x.dev)")
        >>> link = segments[-1]
        >>> link.url, [child.text for child in link.children]
        ('https://x.dev', ['the ', '**docs**'])
    """
    return _DEFAULT_RESOLVER.resolve(text)
