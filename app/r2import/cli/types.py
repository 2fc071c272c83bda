"""Shared helpers for CLI commands."""

from pathlib import Path

import typer

from r2import.core.errors import SettingsError
from r2import.core.settings import Settings, load_settings
from r2import.utils.formatting import print_import_error


def get_settings_path(ctx: typer.Context) -> Path | None:
    """Settings path given with the global --config option, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("settings_path")


def get_settings(ctx: typer.Context) -> Settings:
    """Load settings for a command, exiting with code 1 on failure.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Loaded settings.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    try:
        return load_settings(get_settings_path(ctx))
    except SettingsError as e:
        print_import_error(e)
        raise typer.Exit(code=1) from e


def is_quiet(ctx: typer.Context) -> bool:
    """Whether the global --quiet option was given."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get("quiet", False))
