"""Thematic break classifier mixin."""

from __future__ import annotations

import re

from lumenmark.location import SourceLocation
from lumenmark.nodes import ThematicBreak

# 3+ of one character, nothing else once the line is trimmed
_RULE_RE = re.compile(r"-{3,}|_{3,}|\*{3,}")


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    _index: int

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line. Implemented by tokenizer."""
        raise NotImplementedError

    def _is_thematic_break(self, line: str) -> bool:
        return _RULE_RE.fullmatch(line.strip()) is not None

    def _try_scan_thematic_break(self, line: str) -> ThematicBreak | None:
        if not self._is_thematic_break(line):
            return None

        start = self._index
        self._index += 1
        return ThematicBreak(location=self._location(start))
