"""AST to Python value resolution."""

from okrapy.resolver.resolve import Value, resolve, resolve_list

__all__ = ["Value", "resolve", "resolve_list"]
