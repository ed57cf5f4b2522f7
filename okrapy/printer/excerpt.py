"""Render parse errors with a short source excerpt."""

from __future__ import annotations

from okrapy.diagnostics import ParseError
from okrapy.lexer import token_text
from okrapy.printer.renderers import ansi
from okrapy.text import DEFAULT_TAB_WIDTH

_TAB = " " * DEFAULT_TAB_WIDTH


def format_error_excerpt(error: ParseError, source: str, *, color: bool = False) -> str:
    """Format an error as a header plus the surrounding lines and a caret underline.

    Example:

        2:1 - error - unexpected line break; expected delimiter ...
        1 | a: 1
        2 | bad
          | ^~~
    """
    location = error.location
    lines = source.splitlines()
    first = max(1, location.line - 1)
    last = max(location.line, min(len(lines), location.line + 1))
    width = len(str(last))

    header = f"{location} - error - {error.message}"
    output = [ansi("error", header) if color else header]

    for number in range(first, last + 1):
        text = lines[number - 1] if number <= len(lines) else ""
        shown = text.replace("\t", _TAB)
        output.append(f"{number:>{width}} | {shown}".rstrip())
        if number == location.line:
            underline = _underline(error, source)
            output.append(f"{'':>{width}} | {ansi('error', underline) if color else underline}")

    if error.hint:
        output.append(f"hint: {error.hint}")
    return "\n".join(output)


def _underline(error: ParseError, source: str) -> str:
    raw = token_text(source, error.token).rstrip("\r\n")
    length = max(1, len(raw.replace("\t", _TAB)))
    return " " * (error.location.column - 1) + "^" + "~" * (length - 1)
