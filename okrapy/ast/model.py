"""AST data model for Okra documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from okrapy.diagnostics import ParseError


@dataclass(frozen=True, slots=True)
class AstKey:
    """Key text with escapes already removed."""

    value: str


@dataclass(frozen=True, slots=True)
class AstString:
    value: str


@dataclass(frozen=True, slots=True)
class AstNumber:
    value: float


@dataclass(frozen=True, slots=True)
class AstBoolean:
    value: bool


@dataclass(frozen=True, slots=True)
class AstEntry:
    """One line of a list; `key` is None for sequence items."""

    key: AstKey | None
    value: AstValue

    @property
    def is_keyed(self) -> bool:
        return self.key is not None


@dataclass(frozen=True, slots=True)
class AstList:
    """Ordered entries sharing one indentation depth.

    `associative` is fixed by the first entry: keyed entries make a map-like
    list, unkeyed ones a sequence. An empty list is never associative.
    """

    associative: bool
    entries: tuple[AstEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0


AstScalar: TypeAlias = AstString | AstNumber | AstBoolean
AstValue: TypeAlias = AstList | AstScalar


@dataclass(frozen=True, slots=True)
class AstDocument:
    """Root list plus every error collected while parsing it."""

    root: AstList
    errors: tuple[ParseError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors
