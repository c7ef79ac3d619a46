"""Reference HTML renderer and code display.

Mirrors the chat message components: headings, paragraphs, quotes, flat
lists, rules and tables are rendered with inline styling resolved per block;
code blocks go to a ``CodeDisplay`` that highlights line by line and colors
tokens through CSS custom properties.

Thread Safety:
Renderers hold only immutable settings. Each render() call builds its output
in a local StringBuilder, so one instance can serve many threads.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable, Sequence

from lumenmark.errors import RenderError
from lumenmark.highlighting import LexicalHighlighter
from lumenmark.highlighting.lexical import HighlightSegment, classify_lines
from lumenmark.inline import InlineResolver, InlineSegment, resolve_inline
from lumenmark.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    List,
    Paragraph,
    Table,
    ThematicBreak,
)
from lumenmark.renderers.protocol import CodeDisplay
from lumenmark.renderers.theme import DEFAULT_THEME, Theme
from lumenmark.spans import InlineCategory, InlineSpan, TokenSpan
from lumenmark.stringbuilder import StringBuilder
from lumenmark.utils.logger import get_logger

logger = get_logger(__name__)

CodeBlockCallback = Callable[[str, str, str | None], str]

_INLINE_TAGS = {
    InlineCategory.BOLD: "strong",
    InlineCategory.ITALIC: "em",
    InlineCategory.STRIKETHROUGH: "del",
    InlineCategory.INLINE_CODE: "code",
}


def html_escape(s: str) -> str:
    """Escape <, >, & and double quotes."""
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlCodeDisplay:
    """Render code blocks as highlighted HTML.

    Usage:
        >>> display = HtmlCodeDisplay(show_line_numbers=False)
        >>> "lm-code-keyword" in display.render_code("const x = 1;", "ts")
        True

    """

    __slots__ = (
        "_enable_highlight",
        "_highlight_lines",
        "_highlighter",
        "_include_stylesheet",
        "_show_line_numbers",
        "_start_line_number",
        "_theme",
    )

    def __init__(
        self,
        theme: Theme = DEFAULT_THEME,
        *,
        show_line_numbers: bool = True,
        start_line_number: int = 1,
        highlight_lines: Iterable[int] = (),
        enable_highlight: bool = True,
        highlighter: LexicalHighlighter | None = None,
        include_stylesheet: bool = False,
    ) -> None:
        """Initialize code display.

        Args:
            theme: Category colors and language labels
            show_line_numbers: Prefix each line with its number
            start_line_number: Number shown on the first line
            highlight_lines: Displayed line numbers to emphasize
            enable_highlight: Run the lexical highlighter; plain text if False
            highlighter: Custom highlighter (module default if None)
            include_stylesheet: Emit the theme palette in a ``<style>``
                element before each block; otherwise the page supplies it
        """
        self._theme = theme
        self._show_line_numbers = show_line_numbers
        self._start_line_number = start_line_number
        self._highlight_lines = frozenset(highlight_lines)
        self._enable_highlight = enable_highlight
        self._highlighter = highlighter
        self._include_stylesheet = include_stylesheet

    def render_code(self, code: str, language: str, filename: str | None = None) -> str:
        """Render ``code`` with header, line numbers and token colors."""
        lines = code.split("\n")
        if self._enable_highlight:
            if self._highlighter is not None:
                classified = self._highlighter.classify_lines(code, language)
            else:
                classified = classify_lines(code, language)
        else:
            classified = None

        last_number = self._start_line_number + len(lines) - 1
        width = len(str(last_number))

        sb = StringBuilder()
        if self._include_stylesheet:
            sb.append(f"<style>{self._theme.stylesheet()}</style>")
        sb.append(f'<div class="lm-code-block" data-language="{html_escape(language)}">')
        sb.append('<div class="lm-code-header">')
        if filename:
            sb.append(f'<span class="lm-code-filename">{html_escape(filename)}</span>')
        sb.append(f'<span class="lm-code-language">{html_escape(self._theme.language_label(language))}</span>')
        sb.append("</div>")
        sb.append("<pre><code>")
        for idx, line in enumerate(lines):
            number = self._start_line_number + idx
            css = "lm-code-line"
            if number in self._highlight_lines:
                css += " lm-code-line-highlighted"
            sb.append(f'<span class="{css}" data-line="{number}">')
            if self._show_line_numbers:
                sb.append(f'<span class="lm-code-line-number">{str(number).rjust(width)}</span>')
            if classified is None:
                sb.append(html_escape(line))
            else:
                self._render_segments(classified[idx], sb)
            sb.append("</span>")
            if idx < len(lines) - 1:
                sb.append("\n")
        sb.append("</code></pre></div>")
        return sb.build()

    def _render_segments(self, segments: Sequence[HighlightSegment], sb: StringBuilder) -> None:
        for segment in segments:
            if isinstance(segment, TokenSpan):
                var = self._theme.color_var(segment.category)  # type: ignore[arg-type]
                sb.append(f'<span style="color: var({var})">{html_escape(segment.text)}</span>')
            else:
                sb.append(html_escape(segment.text))


class HtmlRenderer:
    """Render a parsed document to HTML.

    Usage:
        >>> from lumenmark import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>\\n'

    """

    __slots__ = ("_code_display", "_open_links_in_new_tab", "_render_code_block", "_resolver")

    def __init__(
        self,
        code_display: CodeDisplay | None = None,
        *,
        render_code_block: CodeBlockCallback | None = None,
        open_links_in_new_tab: bool = True,
        inline_resolver: InlineResolver | None = None,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        """Initialize renderer.

        Args:
            code_display: Display for code blocks (HtmlCodeDisplay if None)
            render_code_block: Callback ``(code, language, filename) -> html``
                that replaces the code display entirely
            open_links_in_new_tab: Add ``target="_blank"`` to links
            inline_resolver: Custom inline resolver (module default if None)
            theme: Theme for the default code display; ignored when
                ``code_display`` is given
        """
        self._code_display = code_display if code_display is not None else HtmlCodeDisplay(theme)
        self._render_code_block = render_code_block
        self._open_links_in_new_tab = open_links_in_new_tab
        self._resolver = inline_resolver

    def render(self, document: Document) -> str:
        """Render every block in source order."""
        sb = StringBuilder()
        for block in document:
            self._render_block(block, sb)
        return sb.build()

    def render_inline(self, text: str) -> str:
        """Render one block's raw text with inline styling applied."""
        sb = StringBuilder()
        self._render_inlines(self._resolve(text), sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(self._resolve(block.raw_text), sb)
                sb.append_line(f"</h{block.level}>")
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(self._resolve(block.raw_text), sb)
                sb.append_line("</p>")
            case CodeBlock():
                sb.append_line(self._render_code(block))
            case BlockQuote():
                sb.append("<blockquote>")
                self._render_inlines(self._resolve(block.raw_text), sb)
                sb.append_line("</blockquote>")
            case List():
                tag = "ol" if block.ordered else "ul"
                sb.append_line(f"<{tag}>")
                for item in block.items:
                    sb.append("<li>")
                    self._render_inlines(self._resolve(item), sb)
                    sb.append_line("</li>")
                sb.append_line(f"</{tag}>")
            case ThematicBreak():
                sb.append_line("<hr />")
            case Table():
                self._render_table(block, sb)
            case _:
                msg = f"Cannot render block of type {type(block).__name__}"
                raise RenderError(msg)

    def _render_code(self, block: CodeBlock) -> str:
        if self._render_code_block is not None:
            return self._render_code_block(block.raw_text, block.language, block.filename)
        return self._code_display.render_code(block.raw_text, block.language, block.filename)

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        sb.append_line("<table>")
        sb.append("<thead><tr>")
        for cell in table.header:
            sb.append("<th>")
            self._render_inlines(self._resolve(cell), sb)
            sb.append("</th>")
        sb.append_line("</tr></thead>")
        if table.body:
            sb.append_line("<tbody>")
            for row in table.body:
                sb.append("<tr>")
                for cell in row:
                    sb.append("<td>")
                    self._render_inlines(self._resolve(cell), sb)
                    sb.append("</td>")
                sb.append_line("</tr>")
            sb.append_line("</tbody>")
        sb.append_line("</table>")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _resolve(self, text: str) -> list[InlineSegment]:
        if self._resolver is not None:
            return self._resolver.resolve(text)
        return resolve_inline(text)

    def _render_inlines(self, segments: Iterable[InlineSegment], sb: StringBuilder) -> None:
        for segment in segments:
            if not isinstance(segment, InlineSpan):
                sb.append(html_escape(segment.text))
            elif segment.category is InlineCategory.LINK:
                self._render_link(segment, sb)
            else:
                tag = _INLINE_TAGS.get(segment.category)  # type: ignore[call-overload]
                if tag is None:
                    logger.debug("No tag for inline category %r, rendering as text", segment.category)
                    sb.append(html_escape(segment.text))
                    continue
                sb.append(f"<{tag}>{html_escape(segment.content)}</{tag}>")

    def _render_link(self, link: InlineSpan, sb: StringBuilder) -> None:
        attrs = f' href="{html_escape(link.url or "")}"'
        if self._open_links_in_new_tab:
            attrs += ' target="_blank" rel="noopener noreferrer"'
        sb.append(f"<a{attrs}>")
        self._render_inlines(link.children, sb)
        sb.append("</a>")
