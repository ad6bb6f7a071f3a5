"""CLI commands for dequarantine.

This package contains all subcommand implementations.
"""

from dequarantine.cli.commands import clean, config, drop

__all__ = ["clean", "config", "drop"]
