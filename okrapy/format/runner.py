"""Format runner over a shared Okra parse result."""

from __future__ import annotations

from okrapy.parser import ParserOptions
from okrapy.pipeline import FormatRunResult, OkraParseResult, parse_result
from okrapy.stringifier import stringify


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: OkraParseResult | None = None,
) -> FormatRunResult:
    """Canonicalize text by resolving and re-stringifying it.

    Text with parse errors is returned unchanged alongside the errors.
    """
    resolved_parse = _resolve_parse(text, options=options, parse=parse)
    errors = resolved_parse.errors

    if errors:
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = stringify(resolved_parse.value())

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        errors=errors,
        changed=formatted_text != resolved_parse.source_text,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    parse: OkraParseResult | None,
) -> OkraParseResult:
    if parse is not None:
        if options is not None:
            raise ValueError("Pass either parse or options, not both")
        if parse.source_text != text:
            raise ValueError("Provided parse result was built from different text")
        return parse
    return parse_result(text, options=options)
