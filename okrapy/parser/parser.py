"""Token cursor parser core."""

from dataclasses import dataclass

from okrapy.diagnostics import DiagnosticSpec, ParseError
from okrapy.lexer import Token, TokenKind
from okrapy.parser.options import ParserOptions


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(
                f"Parser stopped making progress at {parser.current.kind.name} {parser.current.location}"
            )


class Parser:
    """Cursor over a fully materialized token list.

    The list always ends with EOF, and the cursor never moves past it, so
    lookahead never needs a bounds check.
    """

    def __init__(self, tokens: list[Token], options: ParserOptions | None = None) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self._tokens = tokens
        self._options = options or ParserOptions()
        self._position = 0
        self._errors: list[ParseError] = []

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def errors(self) -> list[ParseError]:
        return self._errors

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Token:
        return self._tokens[self._position]

    def at(self, kind: TokenKind) -> bool:
        return self.current.kind == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current.kind in kinds

    def at_eof(self) -> bool:
        return self.at(TokenKind.EOF)

    def nth(self, n: int) -> Token:
        return self._tokens[min(self._position + n, len(self._tokens) - 1)]

    def bump(self) -> Token:
        token = self.current
        if token.kind != TokenKind.EOF:
            self._position += 1
        return token

    def eat(self, kind: TokenKind) -> Token | None:
        if self.at(kind):
            return self.bump()
        return None

    def back_up(self) -> None:
        """Un-consume the previous token so an enclosing list can look at it again."""
        if self._position > 0:
            self._position -= 1

    def error(self, spec: DiagnosticSpec, token: Token | None = None, **fields: object) -> None:
        token = token or self.current
        if self._errors:
            previous = self._errors[-1]
            if previous.token is token and previous.code == spec.code:
                return
        self._errors.append(ParseError.from_spec(spec, token, **fields))

    def finish(self) -> list[ParseError]:
        return self._errors
