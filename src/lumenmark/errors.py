"""Exception classes for lumenmark.

Parsing, inline resolution and highlighting never raise for text input;
every string is some valid parse. The exceptions here cover implementation
bugs caught by invariant checks and misuse of the rendering layer.
"""

from __future__ import annotations


class LumenmarkError(Exception):
    """Base exception for all lumenmark errors.

    Subclass this for specific error categories.
    """

    pass


class InvariantError(LumenmarkError):
    """Segment sequence violates an engine invariant.

    Raised only when ``ParseConfig.check_invariants`` is enabled. A violation
    means a bug in the engine, never a property of the input text.
    """

    def __init__(self, engine: str, message: str, offset: int | None = None) -> None:
        """Initialize invariant error.

        Args:
            engine: Name of the engine that produced the segments
                (e.g., "inline", "highlight")
            message: Description of the violated invariant
            offset: Character offset where the violation was detected
        """
        self.engine = engine
        self.message = message
        self.offset = offset

        location = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{engine}{location}: {message}")


class RenderError(LumenmarkError):
    """Error during rendering.

    Raised when a renderer receives a node it does not know how to render.
    """

    pass
