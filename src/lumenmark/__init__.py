"""
lumenmark: lightweight markup and code highlighting engines for chat text

Three pure, synchronous text transforms:

- Block tokenizer: document text → flat, ordered blocks (heading, paragraph,
  code block, quote, list, rule, table)
- Inline resolver: one block's text → literal runs and styled spans (bold,
  italic, strikethrough, inline code, link)
- Lexical highlighter: one code line → classified token spans (keyword,
  string, number, comment, function call, operator, class name, tag)

Every entry point is total: any string yields a best-effort structure and
no exception.

Quick Start:
    >>> from lumenmark import parse, resolve_inline, classify
    >>> doc = parse("### Title\\n\\n- a\\n- b")
    >>> doc[0].level, doc[0].raw_text
    (3, 'Title')
    >>> doc[1].items
    ('a', 'b')

    >>> # Render with the reference HTML renderer
    >>> from lumenmark import render
    >>> render(parse("**hi**"))
    '<p><strong>hi</strong></p>\\n'

Installation:
    pip install lumenmark              # zero runtime dependencies
    pip install lumenmark[test]        # + pytest and hypothesis
"""

from lumenmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from lumenmark.errors import InvariantError, LumenmarkError, RenderError
from lumenmark.highlighting import (
    LanguageFamily,
    LexicalHighlighter,
    classify,
    classify_lines,
    find_spans,
    resolve_family,
)
from lumenmark.inline import InlineResolver, InlineRule, resolve_inline
from lumenmark.lexer import BlockTokenizer
from lumenmark.location import SourceLocation
from lumenmark.nodes import (
    Block,
    BlockKind,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    List,
    Paragraph,
    Table,
    ThematicBreak,
)
from lumenmark.renderers import (
    CodeDisplay,
    DocumentRenderer,
    HtmlCodeDisplay,
    HtmlRenderer,
    Theme,
)
from lumenmark.serialization import from_dict, from_json, to_dict, to_json
from lumenmark.spans import (
    InlineCategory,
    InlineSpan,
    LiteralRun,
    TokenCategory,
    TokenSpan,
    check_segments,
    reconstruct,
)

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse document text into blocks.

    Args:
        source: Document text
        source_file: Optional source file path recorded on block locations
        config: Config for this call; defaults to the context's ParseConfig

    Returns:
        Document holding the blocks in source order

    Example:
        >>> doc = parse("```typescript example.ts\\nconst x = 1;\\n```")
        >>> block = doc[0]
        >>> block.language, block.filename, block.raw_text
        ('typescript', 'example.ts', 'const x = 1;')
    """
    if config is None:
        blocks = BlockTokenizer(source, source_file=source_file).tokenize()
        return Document(children=tuple(blocks), source_file=source_file)

    with parse_config_context(config):
        blocks = BlockTokenizer(source, source_file=source_file).tokenize()
    return Document(children=tuple(blocks), source_file=source_file)


def render(document: Document, *, open_links_in_new_tab: bool = True) -> str:
    """Render a Document to HTML with the reference renderer.

    Args:
        document: Parsed document
        open_links_in_new_tab: Add ``target="_blank"`` to links

    Returns:
        HTML string
    """
    return HtmlRenderer(open_links_in_new_tab=open_links_in_new_tab).render(document)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "resolve_inline",
    "classify",
    "classify_lines",
    "find_spans",
    "render",
    # Block nodes
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
    # Spans
    "InlineCategory",
    "InlineSpan",
    "LiteralRun",
    "TokenCategory",
    "TokenSpan",
    "check_segments",
    "reconstruct",
    # Engines
    "BlockTokenizer",
    "InlineResolver",
    "InlineRule",
    "LexicalHighlighter",
    "LanguageFamily",
    "resolve_family",
    # Renderers
    "CodeDisplay",
    "DocumentRenderer",
    "HtmlCodeDisplay",
    "HtmlRenderer",
    "Theme",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "LumenmarkError",
    "InvariantError",
    "RenderError",
    # Location
    "SourceLocation",
]
