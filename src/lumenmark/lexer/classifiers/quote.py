"""Block quote classifier mixin."""

from __future__ import annotations

import re

from lumenmark.location import SourceLocation
from lumenmark.nodes import BlockQuote

QUOTE_MARKER = ">"

_MARKER_RE = re.compile(r"^>\s?")


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    _lines: list[str]
    _index: int

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line. Implemented by tokenizer."""
        raise NotImplementedError

    def _is_quote(self, line: str) -> bool:
        return line.startswith(QUOTE_MARKER)

    def _try_scan_block_quote(self, line: str) -> BlockQuote | None:
        """Consume contiguous quote lines.

        Blank lines do not end the quote; they are kept as empty lines and
        surrounding whitespace is trimmed from the joined text. Quotes are
        flat: a nested ``>`` stays in the text.
        """
        if not self._is_quote(line):
            return None

        start = self._index
        quote_lines: list[str] = []
        while self._index < len(self._lines):
            current = self._lines[self._index]
            if self._is_quote(current):
                quote_lines.append(_MARKER_RE.sub("", current, count=1))
            elif current.strip() == "":
                quote_lines.append("")
            else:
                break
            self._index += 1

        return BlockQuote(
            location=self._location(start),
            raw_text="\n".join(quote_lines).strip(),
        )
