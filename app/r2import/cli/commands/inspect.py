"""Inspect command implementation.

Shows the contents of an export file without importing it.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from r2import.core.errors import R2ImportError
from r2import.core.export_format import load_export
from r2import.utils.formatting import (
    console,
    create_mod_table,
    format_mod_row,
    print_import_error,
)


def inspect_export(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="Export file (.r2x or .r2z).",
        ),
    ],
) -> None:
    """Show the profile name and mods listed in an export file.

    Examples:
        r2import inspect shared.r2z
    """
    try:
        export = load_export(file)
    except R2ImportError as e:
        print_import_error(e)
        raise typer.Exit(code=1) from e

    table = create_mod_table(f"Profile: {escape(export.profile_name)}")
    for mod in export.mods:
        table.add_row(*format_mod_row(mod))

    console.print(table)

    disabled = len(export.disabled_mod_names)
    console.print(
        f"\n[muted]{len(export.mods)} mods ({len(export.mods) - disabled} enabled, "
        f"{disabled} disabled)[/muted]"
    )
