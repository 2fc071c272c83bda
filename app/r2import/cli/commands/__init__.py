"""CLI commands for r2import.

This package contains all subcommand implementations.
"""

from r2import.cli.commands import config, import_, inspect

__all__ = ["config", "import_", "inspect"]
