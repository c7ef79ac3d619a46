"""Line-oriented block tokenizer.

Single forward pass over lines. At each line the recognizers run in priority
order and the first one that claims the line consumes it (and any following
lines it owns). There is no backtracking across block types.

Priority:
1. Fenced code      ```lang filename
2. Heading          ## Title
3. Thematic break   ---
4. Block quote      > text
5. Unordered list   - item
6. Ordered list     1. item
7. Table            | a | b | + delimiter row
8. Blank line       skipped
9. Paragraph        fallback

Thread Safety:
BlockTokenizer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from lumenmark.config import ParseConfig, get_parse_config
from lumenmark.errors import InvariantError
from lumenmark.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TableClassifierMixin,
    ThematicClassifierMixin,
)
from lumenmark.location import SourceLocation
from lumenmark.nodes import Block, Paragraph


def split_lines(source: str) -> list[str]:
    """Split source on line breaks, treating \\r\\n and \\r as \\n."""
    return source.replace("\r\n", "\n").replace("\r", "\n").split("\n")


class BlockTokenizer(
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    TableClassifierMixin,
):
    """Turn a document into a flat, ordered list of block nodes.

    Usage:
        >>> tokenizer = BlockTokenizer("# Hello\\n\\nWorld")
        >>> [block.kind.value for block in tokenizer.tokenize()]
        ['heading', 'paragraph']

    Total over all strings: malformed markup degrades (an unterminated fence
    runs to the end of input, a table without data rows is dropped) rather
    than raising.

    """

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Document text
            source_file: Optional source file path recorded on block locations
            config: Explicit config; defaults to the context's ParseConfig
        """
        self._lines = split_lines(source)
        self._index = 0
        self._source_file = source_file
        self._config = config if config is not None else get_parse_config()

        # Priority order is significant: first claimant wins the line
        self._scanners: tuple[Callable[[str], Block | None], ...] = (
            self._try_scan_fence,
            self._try_scan_heading,
            self._try_scan_thematic_break,
            self._try_scan_block_quote,
            self._try_scan_unordered_list,
            self._try_scan_ordered_list,
            self._try_scan_table,
            self._skip_blank_line,
        )

    def tokenize(self) -> list[Block]:
        """Scan the whole document.

        Returns:
            Blocks in source order.
        """
        blocks: list[Block] = []
        while self._index < len(self._lines):
            line = self._lines[self._index]
            for scan in self._scanners:
                start = self._index
                block = scan(line)
                if block is not None:
                    blocks.append(block)
                    break
                if self._index != start:
                    # Consumed without emitting (blank line, dropped table)
                    break
            else:
                blocks.append(self._scan_paragraph())

        if self._config.check_invariants:
            _check_block_order(blocks)
        return blocks

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line."""
        return SourceLocation(
            lineno=start + 1,
            end_lineno=max(self._index, start + 1),
            source_file=self._source_file,
        )

    def _skip_blank_line(self, line: str) -> None:
        if line.strip() == "":
            self._index += 1
        return None

    def _starts_block(self, index: int) -> bool:
        """Would the line at ``index`` be claimed by a non-paragraph block?"""
        line = self._lines[index]
        return (
            self._is_fence_start(line)
            or self._is_heading(line)
            or self._is_thematic_break(line)
            or self._is_quote(line)
            or self._is_list_item(line)
            or self._is_table_start(index)
        )

    def _scan_paragraph(self) -> Paragraph:
        """Consume lines until a blank line or the start of another block."""
        start = self._index
        self._index += 1
        while (
            self._index < len(self._lines)
            and self._lines[self._index].strip() != ""
            and not self._starts_block(self._index)
        ):
            self._index += 1

        return Paragraph(
            location=self._location(start),
            raw_text="\n".join(self._lines[start : self._index]),
        )


def _check_block_order(blocks: list[Block]) -> None:
    """Blocks must cover disjoint, increasing line ranges."""
    last_line = 0
    for block in blocks:
        if block.location.lineno <= last_line:
            raise InvariantError(
                "block",
                f"{type(block).__name__} at line {block.location.lineno} overlaps previous block",
            )
        last_line = block.location.end_lineno
