"""Parse error codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class ErrorCode(StrEnum):
    UNEXPECTED_TOKEN = "UNEXPECTED_TOKEN"
    UNEXPECTED_EOF = "UNEXPECTED_EOF"
    INVALID_INDENT = "INVALID_INDENT"
    INVALID_BOOLEAN = "INVALID_BOOLEAN"
    INVALID_NUMBER = "INVALID_NUMBER"
    MIXED_LIST_ENTRIES = "MIXED_LIST_ENTRIES"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: ErrorCode
    message: str
    hint: str | None = None


UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.UNEXPECTED_TOKEN,
    message="unexpected {found}; {expected}",
)

UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.UNEXPECTED_EOF,
    message="unexpected end of input; {expected}",
)

INVALID_INDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.INVALID_INDENT,
    message="expected {expected} tab(s) of indentation, found {actual}",
    hint='Indent nested entries one tab deeper than the line ending with "/".',
)

INVALID_BOOLEAN: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.INVALID_BOOLEAN,
    message=(
        '"{text}" is not a valid boolean value; must be one of "true", "false", '
        '"yes", "no", "y", or "n" (case-insensitive)'
    ),
)

INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.INVALID_NUMBER,
    message=(
        '"{text}" is not a valid number value; must be an integer (ex. "3"), '
        'a float (ex. "-0.5"), or a scientific form (ex. "2.1e10")'
    ),
)

MIXED_LIST_ENTRIES: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.MIXED_LIST_ENTRIES,
    message="cannot mix keyed and non-keyed entries in the same list",
    hint="Give every entry in the list a key, or remove all of the keys.",
)

NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code=ErrorCode.INVALID_INDENT,
    message="nested list exceeds the maximum depth of {max_depth}",
    hint="Flatten the document or raise ParserOptions.max_depth.",
)
