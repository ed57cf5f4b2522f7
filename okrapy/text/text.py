from dataclasses import dataclass
from typing import Final

DEFAULT_TAB_WIDTH: Final[int] = 4
"""Number of columns a tab advances the cursor by."""


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, as character offsets.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a character: 0-based offset, 1-based line and column."""

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class SourceCursor:
    """Forward-only character cursor that tracks offset, line and column."""

    def __init__(self, source: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> None:
        if tab_width < 1:
            raise ValueError("tab_width must be >= 1")
        self._source = source
        self._tab_width = tab_width
        self._offset = 0
        self._line = 1
        self._column = 1

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def is_eof(self) -> bool:
        return self._offset >= len(self._source)

    def location(self) -> SourceLocation:
        return SourceLocation(offset=self._offset, line=self._line, column=self._column)

    def peek(self, ahead: int = 0) -> str:
        """Character `ahead` positions past the cursor, or "\\0" past the end."""
        index = self._offset + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def advance(self) -> str:
        if self.is_eof:
            return "\0"
        ch = self._source[self._offset]
        self._offset += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        elif ch == "\t":
            self._column += self._tab_width
        else:
            self._column += 1
        return ch

    def advance_while(self, chars: str) -> str:
        start = self._offset
        while not self.is_eof and self.peek() in chars:
            self.advance()
        return self._source[start : self._offset]

    def range_from(self, start: int) -> TextRange:
        return TextRange(start, self._offset)


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start : range.end]
