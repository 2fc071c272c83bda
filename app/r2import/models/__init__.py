"""Data models for r2import.

This module exports the core data structures used throughout the application.
"""

from r2import.models.export import ExportFormat, ExportMod
from r2import.models.mod_manifest import ModManifest
from r2import.models.package import Package, PackageVersion, ResolvedCombo
from r2import.models.version import VersionNumber

__all__ = [
    "ExportFormat",
    "ExportMod",
    "ModManifest",
    "Package",
    "PackageVersion",
    "ResolvedCombo",
    "VersionNumber",
]
