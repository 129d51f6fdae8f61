"""
Display helpers — рендеринг результатов pipeline для консоли.
"""

from .format_set import (
    ITEM_QUOTE,
    ITEM_SEPARATOR,
    LINE_SEPARATOR,
    SET_CLOSE,
    SET_OPEN,
    format_line,
    format_set,
    quote,
)

__all__ = [
    # Constants
    "SET_OPEN",
    "SET_CLOSE",
    "ITEM_SEPARATOR",
    "ITEM_QUOTE",
    "LINE_SEPARATOR",
    # Functions
    "quote",
    "format_set",
    "format_line",
]
