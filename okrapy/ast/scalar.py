"""Scalar literal helpers shared by the parser and the stringifier."""

from __future__ import annotations

import math
import re
from typing import Final

_NUMBER_RE = re.compile(r"^[+-]?\d+(\.\d+)?([eE][+-]?\d+)?$", re.ASCII)

TRUE_LITERALS: Final[frozenset[str]] = frozenset({"true", "yes", "y"})
FALSE_LITERALS: Final[frozenset[str]] = frozenset({"false", "no", "n"})

# Integral floats below this magnitude print without an exponent.
_PLAIN_INTEGER_LIMIT: Final[float] = 1e16


def parse_bool(text: str) -> bool | None:
    normalized = text.strip().lower()
    if normalized in TRUE_LITERALS:
        return True
    if normalized in FALSE_LITERALS:
        return False
    return None


def parse_number(text: str) -> float | None:
    normalized = text.strip()
    if not _NUMBER_RE.fullmatch(normalized):
        return None
    return float(normalized)


def format_number(value: int | float) -> str:
    """Canonical text for a number, accepted back by `parse_number`.

    Integral values print without a fractional part (`2.0` -> `"2"`); other
    floats use the shortest repr that round-trips (`-0.5`, `1e-07`).
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"{value!r} cannot be converted to Okra")
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)
