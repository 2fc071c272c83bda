"""Profile import pipeline.

This module provides mod installation sequencing, config extraction,
stage-then-commit profile population and the end-to-end import.
"""

from r2import.importer.committer import populate_imported_profile
from r2import.importer.context import ImportContext
from r2import.importer.extractor import extract_imported_profile_configs
from r2import.importer.pipeline import ImportResult, import_profile
from r2import.importer.sequencer import install_mods_to_profile

__all__ = [
    "ImportContext",
    "ImportResult",
    "extract_imported_profile_configs",
    "import_profile",
    "install_mods_to_profile",
    "populate_imported_profile",
]
