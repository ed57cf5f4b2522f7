"""Parse error type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from okrapy.diagnostics.codes import DiagnosticSpec, ErrorCode

if TYPE_CHECKING:
    from okrapy.lexer.tokens import Token
    from okrapy.text import SourceLocation


@dataclass(frozen=True, slots=True)
class ParseError:
    """Recoverable error collected by the parser; points at the offending token."""

    code: ErrorCode
    message: str
    token: Token
    hint: str | None = None

    @property
    def location(self) -> SourceLocation:
        return self.token.location

    @staticmethod
    def from_spec(spec: DiagnosticSpec, token: Token, **fields: object) -> ParseError:
        return ParseError(
            code=spec.code,
            message=spec.message.format(**fields) if fields else spec.message,
            token=token,
            hint=spec.hint,
        )

    def __str__(self) -> str:
        return f"{self.location} - {self.code} - {self.message}"
