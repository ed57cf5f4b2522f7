"""Diagnostics."""

from okrapy.diagnostics.codes import (
    INVALID_BOOLEAN,
    INVALID_INDENT,
    INVALID_NUMBER,
    MIXED_LIST_ENTRIES,
    NESTING_TOO_DEEP,
    UNEXPECTED_EOF,
    UNEXPECTED_TOKEN,
    DiagnosticSpec,
    ErrorCode,
)
from okrapy.diagnostics.error import ParseError
from okrapy.diagnostics.report import has_errors

__all__ = [
    "INVALID_BOOLEAN",
    "INVALID_INDENT",
    "INVALID_NUMBER",
    "MIXED_LIST_ENTRIES",
    "NESTING_TOO_DEEP",
    "UNEXPECTED_EOF",
    "UNEXPECTED_TOKEN",
    "DiagnosticSpec",
    "ErrorCode",
    "ParseError",
    "has_errors",
]
