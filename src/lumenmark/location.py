"""Source location tracking for block nodes.

Blocks record the span of source lines they were built from so renderers and
tools can map output back to the input text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line range of a block in its source document.

    All positions are 1-indexed; ``end_lineno`` is inclusive.

    Attributes:
        lineno: First source line of the block
        end_lineno: Last source line consumed by the block
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, end_lineno=5)
        >>> str(loc)
        '3-5'

        >>> str(SourceLocation(1, 1, "chat.md"))
        'chat.md:1'

    """

    lineno: int
    end_lineno: int
    source_file: str | None = None

    @property
    def line_count(self) -> int:
        """Number of source lines covered."""
        return self.end_lineno - self.lineno + 1

    def __str__(self) -> str:
        """Format location for log messages.

        Returns:
            Formatted string like "file.md:10-12" or "10"
        """
        lines = str(self.lineno)
        if self.end_lineno != self.lineno:
            lines = f"{self.lineno}-{self.end_lineno}"
        if self.source_file:
            return f"{self.source_file}:{lines}"
        return lines
