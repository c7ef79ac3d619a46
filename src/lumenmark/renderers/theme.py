"""Presentation theme consulted by the reference renderers.

Maps highlighter categories to CSS custom properties and language names to
display labels. The engines never read this module; colors are purely a
rendering concern.

Usage:
    >>> from lumenmark.renderers.theme import DEFAULT_THEME
    >>> DEFAULT_THEME.color_var(TokenCategory.KEYWORD)
    '--lm-code-keyword'
    >>> DEFAULT_THEME.language_label("typescript")
    'TS'

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from lumenmark.spans import TokenCategory

CODE_COLOR_VARS: Mapping[TokenCategory, str] = MappingProxyType(
    {
        TokenCategory.KEYWORD: "--lm-code-keyword",
        TokenCategory.STRING: "--lm-code-string",
        TokenCategory.NUMBER: "--lm-code-number",
        TokenCategory.COMMENT: "--lm-code-comment",
        TokenCategory.FUNCTION_CALL: "--lm-code-function",
        TokenCategory.OPERATOR: "--lm-code-operator",
        TokenCategory.CLASS_NAME: "--lm-code-class",
        TokenCategory.TAG: "--lm-code-tag",
    }
)

LANGUAGE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "javascript": "JS", "typescript": "TS", "python": "Python", "java": "Java",
        "cpp": "C++", "c": "C", "csharp": "C#", "go": "Go", "rust": "Rust",
        "swift": "Swift", "kotlin": "Kotlin", "ruby": "Ruby", "php": "PHP",
        "html": "HTML", "css": "CSS", "json": "JSON", "yaml": "YAML", "sql": "SQL",
        "bash": "Bash", "shell": "Shell", "jsx": "JSX", "tsx": "TSX", "vue": "Vue",
        "svelte": "Svelte", "markdown": "MD",
    }
)  # fmt: skip

LIGHT_PALETTE: Mapping[str, str] = MappingProxyType(
    {
        "--lm-code-bg": "#f8fafc",
        "--lm-code-border": "#e2e8f0",
        "--lm-code-text": "#334155",
        "--lm-code-line-number": "#94a3b8",
        "--lm-code-keyword": "#8250df",
        "--lm-code-string": "#0a7d46",
        "--lm-code-number": "#cf5c00",
        "--lm-code-comment": "#6b7280",
        "--lm-code-function": "#0969da",
        "--lm-code-operator": "#cf222e",
        "--lm-code-class": "#953800",
        "--lm-code-tag": "#1a7f37",
    }
)

DARK_PALETTE: Mapping[str, str] = MappingProxyType(
    {
        "--lm-code-bg": "#1e293b",
        "--lm-code-border": "#334155",
        "--lm-code-text": "#e2e8f0",
        "--lm-code-line-number": "#64748b",
        "--lm-code-keyword": "#c792ea",
        "--lm-code-string": "#c3e88d",
        "--lm-code-number": "#f78c6c",
        "--lm-code-comment": "#64748b",
        "--lm-code-function": "#82aaff",
        "--lm-code-operator": "#89ddff",
        "--lm-code-class": "#ffcb6b",
        "--lm-code-tag": "#f07178",
    }
)


@dataclass(frozen=True, slots=True)
class Theme:
    """Category colors and language labels for code display.

    Attributes:
        code_colors: CSS custom property per token category
        default_code_color: Property for unclassified text
        language_labels: Display label per lowercase language name
        light: Values for the light palette
        dark: Values for the dark palette

    """

    code_colors: Mapping[TokenCategory, str] = field(default_factory=lambda: CODE_COLOR_VARS)
    default_code_color: str = "--lm-code-text"
    language_labels: Mapping[str, str] = field(default_factory=lambda: LANGUAGE_LABELS)
    light: Mapping[str, str] = field(default_factory=lambda: LIGHT_PALETTE)
    dark: Mapping[str, str] = field(default_factory=lambda: DARK_PALETTE)

    def color_var(self, category: TokenCategory | None) -> str:
        """CSS custom property for ``category`` (None for literal text)."""
        if category is None:
            return self.default_code_color
        return self.code_colors.get(category, self.default_code_color)

    def language_label(self, language: str) -> str:
        """Short display label, falling back to the language name itself."""
        return self.language_labels.get(language.lower(), language)

    def stylesheet(self) -> str:
        """CSS declaring both palettes, keyed on ``data-theme``."""
        light = "".join(f"    {name}: {value};\n" for name, value in self.light.items())
        dark = "".join(f"    {name}: {value};\n" for name, value in self.dark.items())
        return (
            ':root, [data-theme="light"] {\n'
            f"{light}"
            "}\n"
            '[data-theme="dark"] {\n'
            f"{dark}"
            "}\n"
        )


DEFAULT_THEME = Theme()
