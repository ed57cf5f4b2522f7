"""Scan/parse/resolve pipeline."""

from okrapy.pipeline.entrypoints import OkraSyntaxError, parse, parse_result
from okrapy.pipeline.result import OkraParseResult
from okrapy.pipeline.results import FormatRunResult

__all__ = [
    "FormatRunResult",
    "OkraParseResult",
    "OkraSyntaxError",
    "parse",
    "parse_result",
]
