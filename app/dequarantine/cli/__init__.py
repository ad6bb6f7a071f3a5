"""CLI package for dequarantine.

This package contains the Typer application and all subcommands.
"""

from dequarantine.cli.main import app

__all__ = ["app"]
