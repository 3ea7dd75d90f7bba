"""Command-line interface for linsgd."""

from linsgd.cli.main import main

__all__ = ["main"]
