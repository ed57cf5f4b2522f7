"""Okra parse entrypoints."""

from okrapy.ast import AstDocument
from okrapy.lexer import LexerOptions, Token, scan
from okrapy.parser.grammar import parse_list
from okrapy.parser.options import ParserOptions
from okrapy.parser.parser import Parser


def parse_document(tokens: list[Token], options: ParserOptions | None = None) -> AstDocument:
    """Build a document from scanned tokens, collecting errors instead of raising."""
    parser = Parser(tokens, options)
    root = parse_list(parser, 0)
    return AstDocument(root=root, errors=tuple(parser.finish()))


def parse_ast(
    text: str,
    options: ParserOptions | None = None,
    *,
    lexer_options: LexerOptions | None = None,
) -> AstDocument:
    return parse_document(scan(text, lexer_options), options)
