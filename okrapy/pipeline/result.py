"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from okrapy.diagnostics import has_errors
from okrapy.resolver import resolve

if TYPE_CHECKING:
    from okrapy.ast import AstDocument, AstList
    from okrapy.diagnostics import ParseError
    from okrapy.lexer import Token
    from okrapy.parser import ParserOptions
    from okrapy.resolver import Value


@dataclass(slots=True)
class OkraParseResult:
    """Tokens, AST and lazily resolved value for one source text."""

    source_text: str
    tokens: list[Token]
    document: AstDocument
    options: ParserOptions
    _value: Value | None = field(default=None, init=False, repr=False)
    _resolved: bool = field(default=False, init=False, repr=False)

    @property
    def errors(self) -> list[ParseError]:
        return list(self.document.errors)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.document.errors)

    @property
    def ok(self) -> bool:
        return self.document.ok

    def root(self) -> AstList:
        return self.document.root

    def value(self) -> Value:
        """Resolved value of the (possibly partial) tree, computed once."""
        if not self._resolved:
            self._value = resolve(self.document)
            self._resolved = True
        return self._value
