"""Import command implementation.

Imports an exported profile into the profile root, optionally replacing
an existing profile.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from r2import.cli.types import get_settings, is_quiet
from r2import.core.errors import R2ImportError
from r2import.importer.context import ImportContext
from r2import.importer.pipeline import import_profile
from r2import.utils.formatting import (
    console,
    print_import_error,
    print_info,
    print_success,
    print_warning,
)


def import_command(
    ctx: typer.Context,
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="Export file (.r2x or .r2z).",
        ),
    ],
    community: Annotated[
        str,
        typer.Option(
            "--community",
            "-c",
            help="Community (game) identifier the profile targets.",
        ),
    ],
    profile: Annotated[
        str | None,
        typer.Option(
            "--profile",
            "-p",
            help="Target profile name (default: the exported profile name).",
        ),
    ] = None,
    update: Annotated[
        bool,
        typer.Option(
            "--update",
            "-u",
            help="Replace an existing profile. The profile is only changed if the import succeeds.",
        ),
    ] = False,
) -> None:
    """Import a shared profile.

    Resolves the exported mods for the community, installs them from the
    package cache, restores disabled mods and copies bundled configs.

    Examples:
        r2import import shared.r2z -c riskofrain2
        r2import import shared.r2z -c riskofrain2 -p Modded --update
    """
    settings = get_settings(ctx)
    context = ImportContext.from_settings(settings)
    quiet = is_quiet(ctx)

    def report(status: str) -> None:
        if not quiet:
            console.print(f"[muted]{status}[/muted]")

    try:
        result = import_profile(
            file,
            community,
            context,
            profile_name=profile,
            is_update=update,
            on_progress=report,
        )
    except R2ImportError as e:
        print_import_error(e)
        raise typer.Exit(code=1) from e

    for dependency_string in result.unresolved:
        print_warning(escape(f"Not available for {community}: {dependency_string}"))

    print_success(
        escape(f"Imported {len(result.installed)} mods into profile '{result.profile_name}'.")
    )
    if not quiet:
        print_info(escape(f"Profile directory: {result.profile_path}"))
