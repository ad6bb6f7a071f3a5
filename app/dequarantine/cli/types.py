"""Shared types and utilities for CLI commands.

This module provides helper functions used across multiple CLI command
modules to avoid code duplication.
"""

import typer
from rich.markup import escape

from dequarantine.core.attributes import BackendUnavailableError
from dequarantine.core.config import DequarantineConfig, OutputFormat
from dequarantine.core.service import AttributeService
from dequarantine.ingest.report import IngestReport
from dequarantine.utils.formatting import print_error


def get_config(ctx: typer.Context) -> DequarantineConfig:
    """Get the configuration loaded by the main callback."""
    obj = ctx.find_root().obj or {}
    config = obj.get("config")
    if isinstance(config, DequarantineConfig):
        return config
    return DequarantineConfig()


def is_quiet(ctx: typer.Context) -> bool:
    """Check if --quiet was given."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get("quiet", False))


def resolve_format(ctx: typer.Context, output_format: OutputFormat | None) -> OutputFormat:
    """Pick the explicit --format or fall back to the configured one."""
    if output_format is not None:
        return output_format
    return get_config(ctx).output_format


def get_service(dry_run: bool = False) -> AttributeService:
    """Create an attribute service for this platform.

    Raises:
        typer.Exit: If no extended attribute backend is available.
    """
    try:
        return AttributeService(dry_run=dry_run)
    except BackendUnavailableError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def exit_for(ctx: typer.Context, result: IngestReport) -> None:
    """Exit with status 1 if the report needs attention and config asks for it."""
    if result.has_failures and get_config(ctx).exit_nonzero_on_failure:
        raise typer.Exit(code=1)
