"""Parser (token cursor + recursive descent grammar)."""

from okrapy.parser.grammar import (
    VALUE_PARSERS,
    describe_token,
    parse_entry,
    parse_list,
)
from okrapy.parser.okra import parse_ast, parse_document
from okrapy.parser.options import DEFAULT_MAX_DEPTH, ParserOptions
from okrapy.parser.parse_recovery import recover_line
from okrapy.parser.parser import Parser, ParserProgress

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "VALUE_PARSERS",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "describe_token",
    "parse_ast",
    "parse_document",
    "parse_entry",
    "parse_list",
    "recover_line",
]
