"""List marker classifier mixin."""

from __future__ import annotations

import re

from lumenmark.location import SourceLocation
from lumenmark.nodes import List

_UNORDERED_RE = re.compile(r"^[-*+]\s")
_ORDERED_RE = re.compile(r"^[0-9]+\.\s")


class ListClassifierMixin:
    """Mixin providing flat list classification.

    Unordered and ordered items never merge: a ``1.`` line directly after a
    ``-`` item starts a new list.
    """

    _lines: list[str]
    _index: int

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line. Implemented by tokenizer."""
        raise NotImplementedError

    def _is_list_item(self, line: str) -> bool:
        return _UNORDERED_RE.match(line) is not None or _ORDERED_RE.match(line) is not None

    def _try_scan_unordered_list(self, line: str) -> List | None:
        return self._scan_list(line, _UNORDERED_RE, ordered=False)

    def _try_scan_ordered_list(self, line: str) -> List | None:
        return self._scan_list(line, _ORDERED_RE, ordered=True)

    def _scan_list(self, line: str, marker: re.Pattern[str], *, ordered: bool) -> List | None:
        """Consume sibling items matching ``marker``, stripping the marker."""
        if marker.match(line) is None:
            return None

        start = self._index
        items: list[str] = []
        while self._index < len(self._lines) and marker.match(self._lines[self._index]):
            items.append(marker.sub("", self._lines[self._index], count=1))
            self._index += 1

        return List(location=self._location(start), ordered=ordered, items=tuple(items))
