"""Renderer protocols: the collaborator seams around the engines.

The engines produce plain data (blocks and segments). Anything that turns
that data into output implements one of these protocols. The built-in
``HtmlRenderer`` and ``HtmlCodeDisplay`` are the reference implementations.

Example:
    from lumenmark.renderers.protocol import DocumentRenderer

    def render_message(renderer: DocumentRenderer, text: str) -> str:
        return renderer.render(parse(text))

"""

from typing import Protocol

from lumenmark.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers.

    Implementations resolve inline spans for text-bearing blocks and hand
    code blocks to a ``CodeDisplay``.

    """

    def render(self, document: Document) -> str:
        """Render a parsed document to a string."""
        ...


class CodeDisplay(Protocol):
    """Protocol for code block display.

    Implementations call the lexical highlighter per line and own all
    presentation: colors, line numbers, headers.

    Contract:
        - MUST NOT raise for any code or language
        - SHOULD fall back to plain text when highlighting is disabled

    """

    def render_code(self, code: str, language: str, filename: str | None = None) -> str:
        """Render a code block's raw text."""
        ...
