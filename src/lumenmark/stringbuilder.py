"""StringBuilder for linear-time string accumulation.

Collects fragments in a list and joins once at the end, so renderers never
pay for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("hi").append_line("</p>").build()
        '<p>hi</p>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append ``s``; empty strings are skipped. Returns self for chaining."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append ``s`` followed by a newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)
