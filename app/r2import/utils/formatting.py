"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from r2import.core.errors import R2ImportError
    from r2import.models.export import ExportMod

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "#69B9A1",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "mod_enabled": "bold #69B9A1",
        "mod_disabled": "#226666",
    }
)


def _detect_color_system() -> str | None:
    """Use truecolor for interactive terminals, otherwise let Rich decide."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_mod_table(title: str) -> Table:
    """Create a pre-configured table for displaying exported mods.

    Args:
        title: Table title.

    Returns:
        Rich Table with status, name, version and dependency string columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Mod", no_wrap=True)
    table.add_column("Version", style="muted")
    table.add_column("State", style="info")
    return table


def format_mod_row(mod: ExportMod) -> tuple[str, str, str, str]:
    """Format an exported mod as a table row.

    Args:
        mod: The exported mod.

    Returns:
        Tuple of (icon, name, version, state) with Rich markup.
    """
    if mod.enabled:
        return (
            "[mod_enabled]●[/]",
            f"[mod_enabled]{escape(mod.name)}[/]",
            f"[muted]{mod.version}[/]",
            "enabled",
        )
    return (
        "[mod_disabled]○[/]",
        f"[mod_disabled]{escape(mod.name)}[/]",
        f"[muted]{mod.version}[/]",
        "[muted]disabled[/]",
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_import_error(error: R2ImportError) -> None:
    """Print an import error with its suggested solution."""
    print_error(escape(f"{error.name}: {error.message}"))
    if error.solution:
        err_console.print(f"[muted]{escape(error.solution)}[/]")
