"""Renderers for lumenmark documents.

The engines stop at plain data; renderers are the collaborators that turn
blocks and spans into output. ``HtmlRenderer`` and ``HtmlCodeDisplay`` are
reference implementations of the protocols in ``renderers.protocol``.
"""

from lumenmark.renderers.html import HtmlCodeDisplay, HtmlRenderer, html_escape
from lumenmark.renderers.protocol import CodeDisplay, DocumentRenderer
from lumenmark.renderers.theme import DEFAULT_THEME, Theme

__all__ = [
    "DEFAULT_THEME",
    "CodeDisplay",
    "DocumentRenderer",
    "HtmlCodeDisplay",
    "HtmlRenderer",
    "Theme",
    "html_escape",
]
