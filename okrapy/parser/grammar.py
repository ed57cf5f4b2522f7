"""Okra grammar routines that build the AST."""

from collections.abc import Callable
from typing import Final, TypeAlias

from okrapy.ast import (
    AstBoolean,
    AstEntry,
    AstKey,
    AstList,
    AstNumber,
    AstString,
    AstValue,
    parse_bool,
    parse_number,
)
from okrapy.diagnostics import (
    INVALID_BOOLEAN,
    INVALID_INDENT,
    INVALID_NUMBER,
    MIXED_LIST_ENTRIES,
    NESTING_TOO_DEEP,
    UNEXPECTED_EOF,
    UNEXPECTED_TOKEN,
)
from okrapy.lexer import Token, TokenKind
from okrapy.parser.parse_recovery import recover_line
from okrapy.parser.parser import Parser, ParserProgress

ValueParser: TypeAlias = Callable[[Parser, Token, int], AstValue | None]

_DELIMITER_SET: Final[str] = '(":", "=", "?", or "/")'

# Tokens that may follow INDENT on a line with no entry on it.
_BLANK_LINE_END: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.NEWLINE, TokenKind.EOF, TokenKind.COMMENT}
)


def parse_list(parser: Parser, depth: int) -> AstList:
    """Parse lines indented by exactly `depth` tabs.

    Returns when a line with shallower indentation shows up (the INDENT token is
    handed back to the caller) or at EOF.
    """
    entries: list[AstEntry] = []
    associative: bool | None = None
    progress = ParserProgress()

    while not parser.at_eof():
        progress.assert_progressing(parser)

        indent = parser.eat(TokenKind.INDENT)
        if indent is None:
            _unexpected(parser, "expected the start of a new line")
            recover_line(parser)
            continue

        if parser.at_set(_BLANK_LINE_END):
            parser.eat(TokenKind.COMMENT)
            parser.eat(TokenKind.NEWLINE)
            continue

        actual = len(indent.value)
        if actual < depth:
            parser.back_up()
            break
        if actual > depth:
            parser.error(INVALID_INDENT, indent, expected=depth, actual=actual)
            recover_line(parser)
            continue

        first = parser.current
        entry = parse_entry(parser, depth)
        if entry is None:
            recover_line(parser)
            continue

        if associative is None:
            associative = entry.is_keyed
        elif entry.is_keyed != associative:
            parser.error(MIXED_LIST_ENTRIES, first)
        entries.append(entry)

    return AstList(associative=bool(associative), entries=tuple(entries))


def parse_entry(parser: Parser, depth: int) -> AstEntry | None:
    """Parse `[key] delimiter [value]`; None means an error was reported."""
    key_token = parser.eat(TokenKind.TEXT)
    key = AstKey(key_token.value) if key_token is not None else None

    if not parser.current.kind.is_delimiter:
        position = "after key" if key is not None else "before value"
        _unexpected(parser, f"expected delimiter {position} {_DELIMITER_SET}")
        return None

    delimiter = parser.bump()
    value = VALUE_PARSERS[delimiter.kind](parser, delimiter, depth)
    if value is None:
        return None
    return AstEntry(key=key, value=value)


def parse_string(parser: Parser, delimiter: Token, depth: int) -> AstString | None:
    text = parser.eat(TokenKind.TEXT)
    value = AstString(text.value if text is not None else "")
    return value if _finish_line(parser) else None


def parse_number_value(parser: Parser, delimiter: Token, depth: int) -> AstNumber | None:
    text = parser.eat(TokenKind.TEXT)
    if text is None:
        _unexpected(parser, 'expected number value after "="')
        return None

    number = parse_number(text.value)
    if number is None:
        parser.error(INVALID_NUMBER, text, text=text.value.strip())
        return None
    return AstNumber(number) if _finish_line(parser) else None


def parse_boolean_value(parser: Parser, delimiter: Token, depth: int) -> AstBoolean | None:
    text = parser.eat(TokenKind.TEXT)
    if text is None:
        _unexpected(parser, 'expected boolean value after "?"')
        return None

    flag = parse_bool(text.value)
    if flag is None:
        parser.error(INVALID_BOOLEAN, text, text=text.value.strip())
        return None
    return AstBoolean(flag) if _finish_line(parser) else None


def parse_nested_list(parser: Parser, delimiter: Token, depth: int) -> AstList:
    # Trailing text is reported, but the block below still belongs to this entry.
    if parser.at(TokenKind.NEWLINE) or parser.at_eof():
        parser.eat(TokenKind.NEWLINE)
    else:
        _unexpected(parser, 'expected line break after "/"')
        recover_line(parser)

    if not parser.options.allows_depth(depth + 1):
        parser.error(NESTING_TOO_DEEP, delimiter, max_depth=parser.options.max_depth)
        _skip_nested_lines(parser, depth)
        return AstList(associative=False)

    return parse_list(parser, depth + 1)


VALUE_PARSERS: Final[dict[TokenKind, ValueParser]] = {
    TokenKind.COLON: parse_string,
    TokenKind.EQUALS: parse_number_value,
    TokenKind.QUESTION: parse_boolean_value,
    TokenKind.SLASH: parse_nested_list,
}


def _finish_line(parser: Parser) -> bool:
    if parser.at_eof() or parser.eat(TokenKind.NEWLINE) is not None:
        return True
    _unexpected(parser, "expected line break")
    return False


def _skip_nested_lines(parser: Parser, depth: int) -> None:
    while parser.at(TokenKind.INDENT):
        indent = parser.current
        if len(indent.value) <= depth and parser.nth(1).kind not in _BLANK_LINE_END:
            break
        recover_line(parser)


def _unexpected(parser: Parser, expected: str) -> None:
    token = parser.current
    if token.kind == TokenKind.EOF:
        parser.error(UNEXPECTED_EOF, token, expected=expected)
    else:
        parser.error(UNEXPECTED_TOKEN, token, found=describe_token(token), expected=expected)


def describe_token(token: Token) -> str:
    match token.kind:
        case TokenKind.TEXT:
            return f'text "{token.value.strip()}"'
        case TokenKind.NEWLINE:
            return "line break"
        case TokenKind.INDENT:
            return "indentation"
        case TokenKind.COMMENT:
            return "comment"
        case TokenKind.EOF:
            return "end of input"
        case _:
            return f'"{token.value}"'
