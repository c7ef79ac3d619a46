"""Line classifier mixins for the block tokenizer.

Each mixin recognizes one block kind. ``_is_*`` methods are pure checks on a
line; ``_try_scan_*`` methods consume lines starting at the tokenizer cursor
and return the block they built, or None when the line is not theirs.
"""

from lumenmark.lexer.classifiers.fence import FenceClassifierMixin
from lumenmark.lexer.classifiers.heading import HeadingClassifierMixin
from lumenmark.lexer.classifiers.list import ListClassifierMixin
from lumenmark.lexer.classifiers.quote import QuoteClassifierMixin
from lumenmark.lexer.classifiers.table import TableClassifierMixin
from lumenmark.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "TableClassifierMixin",
    "ThematicClassifierMixin",
]
