"""ATX heading classifier mixin."""

from __future__ import annotations

import re

from lumenmark.location import SourceLocation
from lumenmark.nodes import Heading

_HEADING_RE = re.compile(r"(#{1,6})\s+(.+)")


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    _index: int

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line. Implemented by tokenizer."""
        raise NotImplementedError

    def _is_heading(self, line: str) -> bool:
        return _HEADING_RE.fullmatch(line) is not None

    def _try_scan_heading(self, line: str) -> Heading | None:
        """Try to classify the current line as an ATX heading.

        Headings are 1-6 ``#`` characters, at least one whitespace character,
        then non-empty text. A seventh ``#`` disqualifies the line.
        """
        match = _HEADING_RE.fullmatch(line)
        if match is None:
            return None

        start = self._index
        self._index += 1
        return Heading(
            location=self._location(start),
            level=len(match.group(1)),  # type: ignore[arg-type]
            raw_text=match.group(2),
        )
