"""Inline span resolution for lumenmark.

Usage:
    >>> from lumenmark.inline import resolve_inline
    >>> [(s.category.value, s.content) for s in resolve_inline("a **b**") if hasattr(s, "category")]
    [('bold', 'b')]
"""

from lumenmark.inline.core import InlineResolver, InlineSegment, resolve_inline
from lumenmark.inline.rules import (
    BOLD_RULE,
    DEFAULT_RULES,
    INLINE_CODE_RULE,
    ITALIC_RULE,
    LINK_RULE,
    STRIKETHROUGH_RULE,
    InlineRule,
)

__all__ = [
    "BOLD_RULE",
    "DEFAULT_RULES",
    "INLINE_CODE_RULE",
    "ITALIC_RULE",
    "LINK_RULE",
    "STRIKETHROUGH_RULE",
    "InlineResolver",
    "InlineRule",
    "InlineSegment",
    "resolve_inline",
]
