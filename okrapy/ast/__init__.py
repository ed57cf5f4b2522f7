"""Typed AST for Okra documents."""

from okrapy.ast.model import (
    AstBoolean,
    AstDocument,
    AstEntry,
    AstKey,
    AstList,
    AstNumber,
    AstScalar,
    AstString,
    AstValue,
)
from okrapy.ast.scalar import (
    FALSE_LITERALS,
    TRUE_LITERALS,
    format_number,
    parse_bool,
    parse_number,
)

__all__ = [
    "FALSE_LITERALS",
    "TRUE_LITERALS",
    "AstBoolean",
    "AstDocument",
    "AstEntry",
    "AstKey",
    "AstList",
    "AstNumber",
    "AstScalar",
    "AstString",
    "AstValue",
    "format_number",
    "parse_bool",
    "parse_number",
]
