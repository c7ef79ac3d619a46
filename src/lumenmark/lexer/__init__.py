"""Block tokenizer for lumenmark.

Usage:
    >>> from lumenmark.lexer import BlockTokenizer
    >>> blocks = BlockTokenizer("- a\\n- b").tokenize()
    >>> blocks[0].items
    ('a', 'b')
"""

from lumenmark.lexer.core import BlockTokenizer, split_lines

__all__ = [
    "BlockTokenizer",
    "split_lines",
]
