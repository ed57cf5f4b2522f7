"""Source text coordinates."""

from okrapy.text.text import (
    DEFAULT_TAB_WIDTH,
    SourceCursor,
    SourceLocation,
    TextRange,
    slice_text_range,
)

__all__ = [
    "DEFAULT_TAB_WIDTH",
    "SourceCursor",
    "SourceLocation",
    "TextRange",
    "slice_text_range",
]
