"""Renderers used by the token printer."""

from __future__ import annotations

from html import escape
from typing import Final, Protocol

from okrapy.lexer import Token

ANSI_RESET: Final[str] = "\x1b[0m"
ANSI_STYLES: Final[dict[str, str]] = {
    "key": "\x1b[1;34m",
    "delimiter": "\x1b[2m",
    "string": "\x1b[32m",
    "number": "\x1b[33m",
    "boolean": "\x1b[35m",
    "comment": "\x1b[90m",
    "error": "\x1b[3;31m",
}


def ansi(style: str, text: str) -> str:
    if not text:
        return text
    return f"{ANSI_STYLES[style]}{text}{ANSI_RESET}"


class Renderer(Protocol):
    """Hooks the printer calls for each piece of source text.

    Token hooks receive the token and its raw source text; `error` and `ignored`
    receive plain text.
    """

    def key(self, token: Token, text: str) -> str: ...
    def delimiter(self, token: Token, text: str) -> str: ...
    def string(self, token: Token, text: str) -> str: ...
    def number(self, token: Token, text: str) -> str: ...
    def boolean(self, token: Token, text: str) -> str: ...
    def comment(self, token: Token, text: str) -> str: ...
    def indent(self, token: Token, text: str) -> str: ...
    def newline(self, token: Token, text: str) -> str: ...
    def error(self, text: str) -> str: ...
    def ignored(self, text: str) -> str: ...
    def before_line(self, line: int) -> str: ...
    def after_line(self, line: int) -> str: ...


class PlainRenderer:
    """Identity renderer; printing with it reproduces the source."""

    def key(self, token: Token, text: str) -> str:
        return text

    def delimiter(self, token: Token, text: str) -> str:
        return text

    def string(self, token: Token, text: str) -> str:
        return text

    def number(self, token: Token, text: str) -> str:
        return text

    def boolean(self, token: Token, text: str) -> str:
        return text

    def comment(self, token: Token, text: str) -> str:
        return text

    def indent(self, token: Token, text: str) -> str:
        return text

    def newline(self, token: Token, text: str) -> str:
        return text

    def error(self, text: str) -> str:
        return text

    def ignored(self, text: str) -> str:
        return text

    def before_line(self, line: int) -> str:
        return ""

    def after_line(self, line: int) -> str:
        return ""


class AnsiRenderer(PlainRenderer):
    """SGR-coloured output for terminals."""

    def key(self, token: Token, text: str) -> str:
        return ansi("key", text)

    def delimiter(self, token: Token, text: str) -> str:
        return ansi("delimiter", text)

    def string(self, token: Token, text: str) -> str:
        return ansi("string", text)

    def number(self, token: Token, text: str) -> str:
        return ansi("number", text)

    def boolean(self, token: Token, text: str) -> str:
        return ansi("boolean", text)

    def comment(self, token: Token, text: str) -> str:
        return ansi("comment", text)

    def error(self, text: str) -> str:
        return ansi("error", text)


class HtmlRenderer(PlainRenderer):
    """HTML spans with `okra-*` classes; every text piece is escaped."""

    def _span(self, css_class: str, text: str) -> str:
        return f'<span class="okra-{css_class}">{escape(text)}</span>'

    def key(self, token: Token, text: str) -> str:
        return self._span("key", text)

    def delimiter(self, token: Token, text: str) -> str:
        return self._span("delimiter", text)

    def string(self, token: Token, text: str) -> str:
        return self._span("string", text)

    def number(self, token: Token, text: str) -> str:
        return self._span("number", text)

    def boolean(self, token: Token, text: str) -> str:
        return self._span("boolean", text)

    def comment(self, token: Token, text: str) -> str:
        return self._span("comment", text)

    def indent(self, token: Token, text: str) -> str:
        return escape(text)

    def newline(self, token: Token, text: str) -> str:
        return escape(text)

    def error(self, text: str) -> str:
        return self._span("error", text)

    def ignored(self, text: str) -> str:
        return escape(text)
