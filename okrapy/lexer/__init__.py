"""Lexer."""

from okrapy.lexer.lexer import Lexer, dump_tokens, scan, token_text
from okrapy.lexer.options import LexerOptions
from okrapy.lexer.tokens import DELIMITER_CHARS, DELIMITER_KINDS, Token, TokenKind

__all__ = [
    "DELIMITER_CHARS",
    "DELIMITER_KINDS",
    "Lexer",
    "LexerOptions",
    "Token",
    "TokenKind",
    "dump_tokens",
    "scan",
    "token_text",
]
