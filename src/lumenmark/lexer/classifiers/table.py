"""Pipe table classifier mixin.

Syntax:
| Header 1 | Header 2 |
|----------|:--------:|
| Cell 1   | Cell 2   |

A table starts on a line containing ``|`` whose next line is a delimiter
row. Contiguous ``|`` lines become rows; delimiter-only rows are dropped.
Alignment markers are accepted but not recorded.

"""

from __future__ import annotations

import re

from lumenmark.config import ParseConfig
from lumenmark.location import SourceLocation
from lumenmark.nodes import Block, Paragraph, Table
from lumenmark.utils.logger import get_logger

logger = get_logger(__name__)

PIPE = "|"

_SEPARATOR_ROW_RE = re.compile(r"^\|?[\s\-:|]+\|?$")
_SEPARATOR_CELL_RE = re.compile(r"[\s\-:]*")


def split_row(line: str) -> tuple[str, ...]:
    """Split a table line into trimmed cells.

    Empty cells created by a leading or trailing pipe are dropped; empty
    cells in the middle of the row are kept.

    Example:
        >>> split_row("| a |  | b |")
        ('a', '', 'b')
    """
    cells = [cell.strip() for cell in line.split(PIPE)]
    if cells and cells[0] == "":
        cells.pop(0)
    if cells and cells[-1] == "":
        cells.pop()
    return tuple(cells)


def is_delimiter_row(cells: tuple[str, ...]) -> bool:
    """True for rows with no cells or only ``-``, ``:`` and whitespace."""
    return all(_SEPARATOR_CELL_RE.fullmatch(cell) for cell in cells)


class TableClassifierMixin:
    """Mixin providing pipe table classification."""

    _lines: list[str]
    _index: int
    _config: ParseConfig

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line. Implemented by tokenizer."""
        raise NotImplementedError

    def _is_table_start(self, index: int) -> bool:
        """Check the line at ``index`` and the delimiter row after it."""
        return (
            PIPE in self._lines[index]
            and index + 1 < len(self._lines)
            and _SEPARATOR_ROW_RE.match(self._lines[index + 1]) is not None
        )

    def _try_scan_table(self, line: str) -> Block | None:
        """Consume a table at the current line.

        Tables with fewer than ``table_min_rows`` rows are dropped: their
        lines are consumed and nothing is emitted, unless strict mode is on,
        in which case the lines come back as a paragraph.
        """
        if not self._is_table_start(self._index):
            return None

        start = self._index
        rows: list[tuple[str, ...]] = []
        while self._index < len(self._lines) and PIPE in self._lines[self._index]:
            cells = split_row(self._lines[self._index])
            if not is_delimiter_row(cells):
                rows.append(cells)
            self._index += 1

        if len(rows) < self._config.table_min_rows:
            logger.debug(
                "Dropping table at line %d: %d row(s), need %d",
                start + 1,
                len(rows),
                self._config.table_min_rows,
            )
            if self._config.strict:
                return Paragraph(
                    location=self._location(start),
                    raw_text="\n".join(self._lines[start : self._index]),
                )
            return None

        return Table(location=self._location(start), rows=tuple(rows))
