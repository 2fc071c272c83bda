"""CLI package for r2import.

This package contains the Typer application and all subcommands.
"""

from r2import.cli.main import app

__all__ = ["app"]
