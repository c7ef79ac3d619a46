"""Utility modules for lumenmark.

Provides:
- logger: get_logger for logging
"""

from lumenmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
