"""Lexer."""

from okrapy.lexer.options import LexerOptions
from okrapy.lexer.tokens import DELIMITER_CHARS, Token, TokenKind
from okrapy.text import SourceCursor, SourceLocation, slice_text_range

_PADDING = " \t"


class Lexer:
    """Line-oriented scanner that turns Okra text into a flat token list.

    Every logical line produces, in order:

    - one INDENT token holding the leading run of tabs (possibly empty),
    - either a COMMENT (dropped unless `keep_comments`) or an optional key TEXT,
      an optional delimiter and an optional value TEXT,
    - a NEWLINE token unless the line is the last one in the source.

    The lexer never fails. Anything irregular ends up inside a TEXT token and is
    left for the parser to reject.
    """

    def __init__(self, source: str, options: LexerOptions | None = None) -> None:
        self._options = options or LexerOptions()
        self._cursor = SourceCursor(source, tab_width=self._options.tab_width)
        self._tokens: list[Token] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._cursor.source

    @property
    def options(self) -> LexerOptions:
        return self._options

    def lex(self) -> list[Token]:
        if self._tokens:
            return self._tokens

        while not self._cursor.is_eof:
            self._lex_line()

        self._push(TokenKind.EOF, "", self._cursor.location(), self._cursor.offset)
        return self._tokens

    def _lex_line(self) -> None:
        cursor = self._cursor

        start, location = cursor.offset, cursor.location()
        indent = cursor.advance_while("\t")
        self._push(TokenKind.INDENT, indent, location, start)

        if cursor.peek() == "#":
            self._lex_comment()
        else:
            self._lex_key()
            delimiter = DELIMITER_CHARS.get(cursor.peek())
            if delimiter is not None:
                self._lex_delimiter(delimiter)
                self._lex_value()

        self._lex_newline()

    def _lex_comment(self) -> None:
        cursor = self._cursor
        start, location = cursor.offset, cursor.location()
        while not cursor.is_eof and not self._at_line_break():
            cursor.advance()
        if self._options.keep_comments:
            self._push(TokenKind.COMMENT, self._raw(start), location, start)

    def _lex_key(self) -> None:
        cursor = self._cursor
        cursor.advance_while(_PADDING)

        start, location = cursor.offset, cursor.location()
        chars: list[str] = []
        # Index one past the last character that must survive trimming.
        keep_until = 0

        while not cursor.is_eof and not self._at_line_break():
            ch = cursor.peek()
            if ch in DELIMITER_CHARS:
                break
            cursor.advance()
            if ch == "\\" and not cursor.is_eof and not self._at_line_break():
                chars.append(cursor.advance())
                keep_until = len(chars)
                continue
            chars.append(ch)
            if ch not in _PADDING:
                keep_until = len(chars)

        value = "".join(chars[:keep_until])
        if value:
            self._push(TokenKind.TEXT, value, location, start)

    def _lex_delimiter(self, kind: TokenKind) -> None:
        cursor = self._cursor
        start, location = cursor.offset, cursor.location()
        cursor.advance()
        self._push(kind, self._raw(start), location, start)

    def _lex_value(self) -> None:
        cursor = self._cursor
        cursor.advance_while(_PADDING)

        start, location = cursor.offset, cursor.location()
        while not cursor.is_eof and not self._at_line_break():
            cursor.advance()
        if cursor.offset > start:
            self._push(TokenKind.TEXT, self._raw(start), location, start)

    def _lex_newline(self) -> None:
        cursor = self._cursor
        if cursor.is_eof:
            return
        start, location = cursor.offset, cursor.location()
        if cursor.peek() == "\r":
            cursor.advance()
        cursor.advance()
        self._push(TokenKind.NEWLINE, self._raw(start), location, start)

    def _at_line_break(self) -> bool:
        ch = self._cursor.peek()
        return ch == "\n" or (ch == "\r" and self._cursor.peek(1) == "\n")

    def _raw(self, start: int) -> str:
        return self.source[start : self._cursor.offset]

    def _push(self, kind: TokenKind, value: str, location: SourceLocation, start: int) -> None:
        self._tokens.append(Token(kind, value, location, self._cursor.range_from(start)))


def scan(source: str, options: LexerOptions | None = None) -> list[Token]:
    """Scan source text into tokens. Always ends with an EOF token."""
    return Lexer(source, options).lex()


def token_text(source: str, token: Token) -> str:
    """Get the raw text of a token from the source string based on its range."""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, location, range, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(
            f"{i:03d} {tok.kind.name:<9} {str(tok.location):<7} "
            f"range={tok.range.as_tuple()} value={tok.value!r} text={text!r}"
        )
