"""Syntax highlighting and error rendering."""

from okrapy.printer.excerpt import format_error_excerpt
from okrapy.printer.printer import Printer, TextMode, highlight_html
from okrapy.printer.renderers import (
    AnsiRenderer,
    HtmlRenderer,
    PlainRenderer,
    Renderer,
    ansi,
)

__all__ = [
    "AnsiRenderer",
    "HtmlRenderer",
    "PlainRenderer",
    "Printer",
    "Renderer",
    "TextMode",
    "ansi",
    "format_error_excerpt",
    "highlight_html",
]
