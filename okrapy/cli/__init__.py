"""Command-line interface."""

from okrapy.cli.main import main

__all__ = ["main"]
