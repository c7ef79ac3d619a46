"""Keyword sets and language aliases for the lexical highlighter.

The highlighter groups concrete languages into families that share a keyword
list. Lookup is case-insensitive; anything unknown uses the C family list.

"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class LanguageFamily(Enum):
    """Keyword-set groupings."""

    C = "c"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"


DEFAULT_FAMILY = LanguageFamily.C

_C_KEYWORDS = (
    "const", "let", "var", "function", "return", "if", "else", "for", "while", "do",
    "switch", "case", "break", "continue", "try", "catch", "finally", "throw", "new",
    "typeof", "instanceof", "in", "of", "class", "extends", "super", "import", "export",
    "default", "from", "as", "async", "await", "yield", "static", "get", "set", "null",
    "undefined", "true", "false", "this", "void", "delete", "debugger",
)  # fmt: skip

_TYPESCRIPT_EXTRA = (
    "type", "interface", "enum", "namespace", "module", "declare", "abstract",
    "implements", "private", "protected", "public", "readonly", "keyof", "infer",
    "never", "unknown", "any",
)  # fmt: skip

_PYTHON_KEYWORDS = (
    "def", "return", "if", "elif", "else", "for", "while", "break", "continue", "try",
    "except", "finally", "raise", "import", "from", "as", "class", "with", "yield",
    "lambda", "pass", "None", "True", "False", "and", "or", "not", "in", "is", "global",
    "nonlocal", "assert", "del", "async", "await", "self",
)  # fmt: skip

_GO_KEYWORDS = (
    "func", "return", "if", "else", "for", "range", "switch", "case", "break",
    "continue", "go", "select", "defer", "panic", "recover", "type", "struct",
    "interface", "map", "chan", "package", "import", "const", "var", "nil", "true",
    "false", "make", "new", "append", "len", "cap",
)  # fmt: skip

_RUST_KEYWORDS = (
    "fn", "return", "if", "else", "for", "while", "loop", "match", "break", "continue",
    "let", "mut", "const", "static", "struct", "enum", "impl", "trait", "type", "pub",
    "mod", "use", "crate", "self", "super", "where", "async", "await", "move", "ref",
    "unsafe", "extern", "dyn", "true", "false", "None", "Some", "Ok", "Err",
)  # fmt: skip

KEYWORDS: MappingProxyType[LanguageFamily, frozenset[str]] = MappingProxyType(
    {
        LanguageFamily.C: frozenset(_C_KEYWORDS),
        LanguageFamily.TYPESCRIPT: frozenset(_C_KEYWORDS + _TYPESCRIPT_EXTRA),
        LanguageFamily.PYTHON: frozenset(_PYTHON_KEYWORDS),
        LanguageFamily.GO: frozenset(_GO_KEYWORDS),
        LanguageFamily.RUST: frozenset(_RUST_KEYWORDS),
    }
)

LANGUAGE_ALIASES: MappingProxyType[str, LanguageFamily] = MappingProxyType(
    {
        # C family: braces, // comments, JavaScript-style keywords
        "c": LanguageFamily.C,
        "h": LanguageFamily.C,
        "cpp": LanguageFamily.C,
        "c++": LanguageFamily.C,
        "cc": LanguageFamily.C,
        "hpp": LanguageFamily.C,
        "cs": LanguageFamily.C,
        "csharp": LanguageFamily.C,
        "java": LanguageFamily.C,
        "kotlin": LanguageFamily.C,
        "kt": LanguageFamily.C,
        "swift": LanguageFamily.C,
        "php": LanguageFamily.C,
        "dart": LanguageFamily.C,
        "js": LanguageFamily.C,
        "javascript": LanguageFamily.C,
        "jsx": LanguageFamily.C,
        "mjs": LanguageFamily.C,
        "cjs": LanguageFamily.C,
        # TypeScript
        "ts": LanguageFamily.TYPESCRIPT,
        "typescript": LanguageFamily.TYPESCRIPT,
        "tsx": LanguageFamily.TYPESCRIPT,
        "mts": LanguageFamily.TYPESCRIPT,
        "cts": LanguageFamily.TYPESCRIPT,
        # Python
        "py": LanguageFamily.PYTHON,
        "python": LanguageFamily.PYTHON,
        "python3": LanguageFamily.PYTHON,
        "pyi": LanguageFamily.PYTHON,
        # Go
        "go": LanguageFamily.GO,
        "golang": LanguageFamily.GO,
        # Rust
        "rs": LanguageFamily.RUST,
        "rust": LanguageFamily.RUST,
    }
)


def resolve_family(language: str | None) -> LanguageFamily:
    """Map a language name or alias to its keyword family.

    Unknown or missing languages resolve to the C family rather than failing.

    Example:
        >>> resolve_family("Python")
        <LanguageFamily.PYTHON: 'python'>
        >>> resolve_family("brainfuck")
        <LanguageFamily.C: 'c'>
    """
    if not language:
        return DEFAULT_FAMILY
    return LANGUAGE_ALIASES.get(language.strip().lower(), DEFAULT_FAMILY)


def is_known_language(language: str | None) -> bool:
    """True if ``language`` has an explicit alias entry."""
    return bool(language) and language.strip().lower() in LANGUAGE_ALIASES


__all__ = [
    "DEFAULT_FAMILY",
    "KEYWORDS",
    "LANGUAGE_ALIASES",
    "LanguageFamily",
    "is_known_language",
    "resolve_family",
]
