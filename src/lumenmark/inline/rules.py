"""Inline span rules, in application priority order.

Each rule pairs a category with its pattern. Group 1 (or group 2 for the
alternate delimiter) captures the span content; link rules capture the label
in group 1 and the destination in group 2.

Order matters: bold must run before italic so ``**x**`` is claimed whole
before single ``*`` delimiters are considered, and inline code runs after
emphasis, so ``*`` inside backticks is still treated as emphasis.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from lumenmark.spans import InlineCategory


@dataclass(frozen=True, slots=True)
class InlineRule:
    """A category and the pattern that detects it within a literal run."""

    category: InlineCategory
    pattern: re.Pattern[str]

    def content(self, match: re.Match[str]) -> str:
        """Captured inner text of a match."""
        return next(group for group in match.groups() if group is not None)


BOLD_RULE = InlineRule(InlineCategory.BOLD, re.compile(r"\*\*(.+?)\*\*|__(.+?)__"))
ITALIC_RULE = InlineRule(InlineCategory.ITALIC, re.compile(r"\*(.+?)\*|_(.+?)_"))
STRIKETHROUGH_RULE = InlineRule(InlineCategory.STRIKETHROUGH, re.compile(r"~~(.+?)~~"))
INLINE_CODE_RULE = InlineRule(InlineCategory.INLINE_CODE, re.compile(r"`([^`]+)`"))
LINK_RULE = InlineRule(InlineCategory.LINK, re.compile(r"\[([^\]]+)\]\(([^)]+)\)"))

DEFAULT_RULES: tuple[InlineRule, ...] = (
    BOLD_RULE,
    ITALIC_RULE,
    STRIKETHROUGH_RULE,
    INLINE_CODE_RULE,
    LINK_RULE,
)

__all__ = [
    "BOLD_RULE",
    "DEFAULT_RULES",
    "INLINE_CODE_RULE",
    "ITALIC_RULE",
    "InlineRule",
    "LINK_RULE",
    "STRIKETHROUGH_RULE",
]
