"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from okrapy.diagnostics import ParseError
from okrapy.pipeline.result import OkraParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: OkraParseResult
    formatted_text: str
    errors: list[ParseError]
    changed: bool
