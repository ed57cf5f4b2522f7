"""Entrypoints that run scan, parse and resolve over one source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from okrapy.lexer import LexerOptions, scan
from okrapy.parser import ParserOptions, parse_document
from okrapy.pipeline.result import OkraParseResult

if TYPE_CHECKING:
    from okrapy.diagnostics import ParseError
    from okrapy.resolver import Value


class OkraSyntaxError(ValueError):
    """Raised by `parse` when the source has at least one parse error."""

    def __init__(self, errors: list[ParseError]) -> None:
        if not errors:
            raise ValueError("OkraSyntaxError needs at least one error")
        super().__init__(errors[0].message)
        self.errors = errors

    @property
    def first(self) -> ParseError:
        return self.errors[0]


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    lexer_options: LexerOptions | None = None,
) -> OkraParseResult:
    """Scan and parse once; errors are collected on the result, never raised."""
    resolved_options = options or ParserOptions()
    tokens = scan(text, lexer_options)
    document = parse_document(tokens, resolved_options)
    return OkraParseResult(
        source_text=text,
        tokens=tokens,
        document=document,
        options=resolved_options,
    )


def parse(text: str, options: ParserOptions | None = None) -> Value:
    """Parse Okra text into str/float/bool/list/dict values.

    Raises OkraSyntaxError carrying every collected error when the text does
    not parse cleanly.
    """
    result = parse_result(text, options)
    if result.has_errors:
        raise OkraSyntaxError(result.errors)
    return result.value()
