"""Okra: a tab-indented, delimiter-typed data serialization language."""

from okrapy.ast import AstDocument, AstList
from okrapy.diagnostics import ErrorCode, ParseError
from okrapy.lexer import LexerOptions, Token, TokenKind, scan
from okrapy.parser import ParserOptions, parse_document
from okrapy.pipeline import OkraParseResult, OkraSyntaxError, parse, parse_result
from okrapy.resolver import Value, resolve
from okrapy.stringifier import stringify

__all__ = [
    "AstDocument",
    "AstList",
    "ErrorCode",
    "LexerOptions",
    "OkraParseResult",
    "OkraSyntaxError",
    "ParseError",
    "ParserOptions",
    "Token",
    "TokenKind",
    "Value",
    "parse",
    "parse_document",
    "parse_result",
    "resolve",
    "scan",
    "stringify",
]
