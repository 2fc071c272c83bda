"""Settings commands.

Show the effective settings or write a default settings file.
"""

from typing import Annotated

import typer
from rich.table import Table

from r2import.cli.types import get_settings, get_settings_path
from r2import.core.errors import SettingsError
from r2import.core.paths import get_settings_path as get_default_settings_path
from r2import.core.settings import Settings, save_settings
from r2import.utils.formatting import (
    console,
    print_error,
    print_import_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Show or initialize import settings.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective import settings."""
    settings = get_settings(ctx)

    table = Table(show_header=True, header_style="bold_header", border_style="border")
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    path = get_settings_path(ctx) or get_default_settings_path()

    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        save_settings(Settings(), path)
    except SettingsError as e:
        print_import_error(e)
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {path}")
