"""Formatting."""

from okrapy.format.runner import run_format

__all__ = ["run_format"]
