"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from okrapy.text import SourceLocation, TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    ERROR = 2

    # -------------------------
    # Layout
    # -------------------------
    INDENT = 10
    NEWLINE = 11
    COMMENT = 12  # only emitted with LexerOptions.keep_comments

    # -------------------------
    # Text
    # -------------------------
    TEXT = 20

    # -------------------------
    # Delimiters
    # -------------------------
    COLON = 30  # :
    EQUALS = 31  # =
    QUESTION = 32  # ?
    SLASH = 33  # /

    @property
    def is_delimiter(self) -> bool:
        return self in DELIMITER_KINDS


DELIMITER_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.COLON,
        TokenKind.EQUALS,
        TokenKind.QUESTION,
        TokenKind.SLASH,
    }
)

DELIMITER_CHARS: Final[dict[str, TokenKind]] = {
    ":": TokenKind.COLON,
    "=": TokenKind.EQUALS,
    "?": TokenKind.QUESTION,
    "/": TokenKind.SLASH,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` is the cooked text (escapes removed, key padding trimmed) while
    `range` covers the raw source characters of the lexeme.
    """

    kind: TokenKind
    value: str
    location: SourceLocation
    range: TextRange
