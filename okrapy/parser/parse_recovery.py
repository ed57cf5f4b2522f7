"""Line-based parser recovery."""

from okrapy.lexer import TokenKind
from okrapy.parser.parser import Parser


def recover_line(parser: Parser) -> bool:
    """Discard the rest of the current line, including its line break.

    Returns False when recovery ran into EOF before finding a line break.
    """
    while not parser.at_eof():
        if parser.bump().kind == TokenKind.NEWLINE:
            return True
    return False
