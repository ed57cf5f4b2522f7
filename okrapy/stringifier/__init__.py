"""Python value to Okra text serialization."""

from okrapy.ast import format_number
from okrapy.stringifier.stringify import escape_key, stringify

__all__ = ["escape_key", "format_number", "stringify"]
