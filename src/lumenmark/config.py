"""ContextVar-based parse configuration for lumenmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by the block tokenizer, the inline resolver and the lexical
highlighter; the rendering theme lives in ``lumenmark.renderers.theme`` and
is never consulted by the engines.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # One-off override
    from lumenmark import parse, ParseConfig
    doc = parse(text, config=ParseConfig(strict=True))

    # Scoped override for several calls
    from lumenmark.config import parse_config_context
    with parse_config_context(ParseConfig(check_invariants=True)):
        doc = parse(text)
        spans = resolve_inline(doc[0].raw_text)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        strict: Re-emit the lines of a dropped table or an unterminated code
            fence as a paragraph instead of silently degrading
        default_code_language: Language recorded on a code block whose fence
            has no info string
        table_min_rows: Minimum rows (header included, delimiter row
            excluded) for a table block to be emitted. With the default of 2
            a lone pipe line over a separator-looking line (``a | b`` then
            ``---``) is dropped; use strict mode to keep it as a paragraph
            or 1 to keep it as a header-only table
        check_invariants: Validate engine output and raise InvariantError on
            overlap, gaps or offset mismatches

    """

    strict: bool = False
    default_code_language: str = "plaintext"
    table_min_rows: int = 2
    check_invariants: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "strict": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(strict=True)):
        ...     doc = parse("| A | B |\\n| - | - |")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
