"""Fenced code block classifier mixin."""

from __future__ import annotations

import re

from lumenmark.config import ParseConfig
from lumenmark.location import SourceLocation
from lumenmark.nodes import Block, CodeBlock, Paragraph
from lumenmark.utils.logger import get_logger

logger = get_logger(__name__)

FENCE_MARKER = "```"

# Info string: ASCII language word, then an optional filename after any whitespace
_INFO_RE = re.compile(r"^```([A-Za-z0-9_]+)?(?:\s+(.+))?")


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    _lines: list[str]
    _index: int
    _config: ParseConfig

    def _location(self, start: int) -> SourceLocation:
        """Location from line ``start`` to the last consumed line. Implemented by tokenizer."""
        raise NotImplementedError

    def _is_fence_start(self, line: str) -> bool:
        return line.startswith(FENCE_MARKER)

    def _try_scan_fence(self, line: str) -> Block | None:
        """Consume a fenced code block starting at the current line.

        Content lines are kept verbatim. An unterminated fence consumes the
        rest of the document; in strict mode those lines come back as a
        paragraph instead.

        Returns:
            CodeBlock (or Paragraph in strict mode) if the line opens a
            fence, None otherwise.
        """
        if not self._is_fence_start(line):
            return None

        start = self._index
        language, filename = self._parse_info_string(line)

        self._index += 1
        content_start = self._index
        while self._index < len(self._lines) and not self._is_fence_start(self._lines[self._index]):
            self._index += 1
        code = "\n".join(self._lines[content_start : self._index])

        if self._index >= len(self._lines):
            logger.debug("Unterminated code fence at line %d runs to end of input", start + 1)
            if self._config.strict:
                return Paragraph(
                    location=self._location(start),
                    raw_text="\n".join(self._lines[start:]),
                )
        else:
            # Closing fence
            self._index += 1

        return CodeBlock(
            location=self._location(start),
            raw_text=code,
            language=language,
            filename=filename,
        )

    def _parse_info_string(self, line: str) -> tuple[str, str | None]:
        """Split a fence line into (language, filename)."""
        match = _INFO_RE.match(line)
        language = self._config.default_code_language
        filename = None
        if match:
            if match.group(1):
                language = match.group(1)
            if match.group(2):
                filename = match.group(2).strip() or None
        return language, filename
