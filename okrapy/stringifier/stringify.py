"""Serialize plain Python values as Okra text."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final

from okrapy.ast import format_number

# Characters the lexer treats as structure inside a key.
_KEY_SPECIALS: Final[frozenset[str]] = frozenset("\\:=?/")
_PADDING: Final[str] = " \t"


def stringify(value: Mapping[str, object] | Sequence[object]) -> str:
    """Render a mapping or sequence as Okra text.

    Empty collections render as a bare `key/` line, so `{}` and `[]` cannot be
    told apart once re-parsed (both come back as `[]`).
    """
    if not _is_collection(value):
        raise TypeError(f"{value!r} cannot be converted to Okra; expected a mapping or a sequence")
    lines: list[str] = []
    _write_collection(value, 0, lines)
    return "".join(lines)


def escape_key(key: str) -> str:
    """Escape a key so the lexer reads it back unchanged."""
    if not key:
        raise ValueError("Okra keys cannot be empty")
    if "\n" in key or "\r" in key:
        raise ValueError(f"Okra keys cannot contain line breaks: {key!r}")

    chars = ["\\" + ch if ch in _KEY_SPECIALS else ch for ch in key]

    if key[0] == "#" or key[0] in _PADDING:
        chars[0] = "\\" + key[0]
    if key[-1] in _PADDING:
        chars[-1] = "\\" + key[-1]
    return "".join(chars)


def _write_collection(value: object, depth: int, lines: list[str]) -> None:
    indent = "\t" * depth
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Okra keys must be strings, got {type(key).__name__}: {key!r}")
            lines.append(indent + escape_key(key))
            _write_value(item, depth, lines)
        return

    for item in value:
        lines.append(indent)
        _write_value(item, depth, lines)


def _write_value(value: object, depth: int, lines: list[str]) -> None:
    # bool before int: True is an int too.
    if isinstance(value, bool):
        lines.append(f"? {'true' if value else 'false'}\n")
    elif isinstance(value, (int, float)):
        lines.append(f"= {format_number(value)}\n")
    elif isinstance(value, str):
        if "\n" in value or "\r" in value:
            raise ValueError(f"Okra strings cannot contain line breaks: {value!r}")
        if value[:1] in (" ", "\t"):
            raise ValueError(f"Okra strings cannot start with spaces or tabs: {value!r}")
        lines.append(f": {value}\n" if value else ":\n")
    elif _is_collection(value):
        lines.append("/\n")
        _write_collection(value, depth + 1, lines)
    else:
        raise TypeError(f"{value!r} cannot be converted to Okra")


def _is_collection(value: object) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
