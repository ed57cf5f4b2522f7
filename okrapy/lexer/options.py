"""Lexer configuration options."""

from dataclasses import dataclass

from okrapy.text import DEFAULT_TAB_WIDTH


@dataclass(frozen=True, slots=True)
class LexerOptions:
    """Knobs for tooling that needs more than the parser does."""

    tab_width: int = DEFAULT_TAB_WIDTH
    keep_comments: bool = False
