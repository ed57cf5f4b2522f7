"""Token printer for syntax highlighting."""

from __future__ import annotations

from enum import IntEnum

from okrapy.diagnostics import ParseError
from okrapy.lexer import LexerOptions, Token, TokenKind, scan, token_text
from okrapy.printer.renderers import HtmlRenderer, PlainRenderer, Renderer


class TextMode(IntEnum):
    KEY = 1
    STRING = 2
    NUMBER = 3
    BOOLEAN = 4


_MODE_AFTER: dict[TokenKind, TextMode] = {
    TokenKind.NEWLINE: TextMode.KEY,
    TokenKind.COLON: TextMode.STRING,
    TokenKind.EQUALS: TextMode.NUMBER,
    TokenKind.QUESTION: TextMode.BOOLEAN,
}


class Printer:
    """Walk tokens in source order and hand every piece of text to a renderer.

    TEXT tokens are rendered by the kind of value the preceding delimiter
    introduced; text before any delimiter on a line is a key.
    """

    def __init__(self, source: str, tokens: list[Token] | None = None) -> None:
        self._source = source
        self._tokens = tokens if tokens is not None else scan(source, LexerOptions(keep_comments=True))
        self._renderer: Renderer = PlainRenderer()
        self._error_tokens: set[Token] = set()

    def with_renderer(self, renderer: Renderer) -> Printer:
        self._renderer = renderer
        return self

    def with_errors(self, *errors: ParseError) -> Printer:
        self._error_tokens.update(error.token for error in errors)
        return self

    def print(self) -> str:
        renderer = self._renderer
        output: list[str] = []
        mode = TextMode.KEY
        position = 0
        line = 0

        for token in self._tokens:
            if token.kind == TokenKind.EOF:
                break
            if token.location.line != line:
                if line:
                    output.append(renderer.after_line(line))
                line = token.location.line
                mode = TextMode.KEY
                output.append(renderer.before_line(line))

            if position < token.range.start:
                output.append(renderer.ignored(self._source[position : token.range.start]))
            output.append(self._render_token(token, mode))
            position = max(position, token.range.end)
            mode = _MODE_AFTER.get(token.kind, mode)

        if position < len(self._source):
            output.append(renderer.ignored(self._source[position:]))
        if line:
            output.append(renderer.after_line(line))
        return "".join(output)

    def _render_token(self, token: Token, mode: TextMode) -> str:
        renderer = self._renderer
        text = token_text(self._source, token)
        if token in self._error_tokens:
            return renderer.error(text)

        match token.kind:
            case TokenKind.INDENT:
                return renderer.indent(token, text)
            case TokenKind.NEWLINE:
                return renderer.newline(token, text)
            case TokenKind.COMMENT:
                return renderer.comment(token, text)
            case TokenKind.COLON | TokenKind.EQUALS | TokenKind.QUESTION | TokenKind.SLASH:
                return renderer.delimiter(token, text)
            case TokenKind.TEXT:
                return self._render_text(token, text, mode)
            case _:
                return renderer.error(text)

    def _render_text(self, token: Token, text: str, mode: TextMode) -> str:
        renderer = self._renderer
        match mode:
            case TextMode.KEY:
                return renderer.key(token, text)
            case TextMode.STRING:
                return renderer.string(token, text)
            case TextMode.NUMBER:
                return renderer.number(token, text)
            case TextMode.BOOLEAN:
                return renderer.boolean(token, text)


def highlight_html(source: str) -> str:
    """Highlighted source wrapped in a `<pre>` block."""
    body = Printer(source).with_renderer(HtmlRenderer()).print()
    return f'<pre class="okra"><code>{body}</code></pre>'
