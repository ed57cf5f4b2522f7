"""Parser configuration options."""

from dataclasses import dataclass
from typing import Final

DEFAULT_MAX_DEPTH: Final[int] = 200
"""Nesting limit that keeps the recursive grammar well inside Python's recursion limit."""


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits applied while building the AST.

    `max_depth` caps how many `/`-opened lists may nest inside the root list.
    Deeper lists are reported as errors instead of being parsed.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError("max_depth cannot be negative")

    def allows_depth(self, depth: int) -> bool:
        return depth <= self.max_depth
