"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from okrapy.diagnostics.error import ParseError


def has_errors(errors: Iterable[ParseError]) -> bool:
    return any(True for _ in errors)
