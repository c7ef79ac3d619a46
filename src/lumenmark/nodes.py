"""Typed block nodes for lumenmark.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Node Hierarchy:
Block (base)
├── Heading
├── Paragraph
├── CodeBlock
├── BlockQuote
├── List
├── ThematicBreak
└── Table
Document (flat, read-only sequence of blocks)

Blocks are never nested. Text-bearing blocks carry their raw inline source;
styling is resolved separately by ``lumenmark.inline``.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal, overload

from lumenmark.location import SourceLocation


class BlockKind(Enum):
    """Discriminator for block nodes."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "codeBlock"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    HR = "hr"
    TABLE = "table"


@dataclass(frozen=True, slots=True)
class Block:
    """Base class for all block nodes.

    Every block records the source lines it was built from.

    """

    kind: ClassVar[BlockKind]

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Heading(Block):
    """ATX heading.

    Markdown: ## Title

    """

    kind: ClassVar[BlockKind] = BlockKind.HEADING

    level: Literal[1, 2, 3, 4, 5, 6]
    raw_text: str


@dataclass(frozen=True, slots=True)
class Paragraph(Block):
    """Run of consecutive text lines, joined with newlines."""

    kind: ClassVar[BlockKind] = BlockKind.PARAGRAPH

    raw_text: str


@dataclass(frozen=True, slots=True)
class CodeBlock(Block):
    """Fenced code block.

    Markdown:
        ```python app.py
        print("hi")
        ```

    ``raw_text`` is the verbatim content between the fences. ``language`` and
    ``filename`` come from the info string.

    """

    kind: ClassVar[BlockKind] = BlockKind.CODE_BLOCK

    raw_text: str
    language: str
    filename: str | None = None


@dataclass(frozen=True, slots=True)
class BlockQuote(Block):
    """Block quote with its ``>`` markers stripped."""

    kind: ClassVar[BlockKind] = BlockKind.BLOCKQUOTE

    raw_text: str


@dataclass(frozen=True, slots=True)
class List(Block):
    """Flat ordered or unordered list.

    ``items`` holds each item's raw text with the marker removed. Ordered
    list numbers are discarded; renderers number items themselves.

    """

    kind: ClassVar[BlockKind] = BlockKind.LIST

    ordered: bool
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Block):
    """Horizontal rule: ---, ***, or ___"""

    kind: ClassVar[BlockKind] = BlockKind.HR


@dataclass(frozen=True, slots=True)
class Table(Block):
    """Pipe table. Row 0 is the header row; the delimiter row is not kept."""

    kind: ClassVar[BlockKind] = BlockKind.TABLE

    rows: tuple[tuple[str, ...], ...]

    @property
    def header(self) -> tuple[str, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def body(self) -> tuple[tuple[str, ...], ...]:
        return self.rows[1:]


@dataclass(frozen=True, slots=True)
class Document:
    """Parsed document: blocks in source order.

    Behaves as a read-only sequence of blocks.

    Example:
        >>> doc = parse("# Title\\n\\nBody")
        >>> [block.kind.value for block in doc]
        ['heading', 'paragraph']

    """

    children: tuple[Block, ...]
    source_file: str | None = None

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.children)

    @overload
    def __getitem__(self, index: int) -> Block: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Block, ...]: ...

    def __getitem__(self, index: int | slice) -> Block | tuple[Block, ...]:
        return self.children[index]


__all__ = [
    "Block",
    "BlockKind",
    "BlockQuote",
    "CodeBlock",
    "Document",
    "Heading",
    "List",
    "Paragraph",
    "Table",
    "ThematicBreak",
]
