"""Command line interface for azwrap."""

from azwrap.cli.main import main

__all__ = ["main"]
