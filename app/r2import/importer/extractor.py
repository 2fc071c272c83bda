"""Config extraction from export archives.

Every archive entry except the export description is copied into the
profile. Entries under ``config/`` are re-rooted into the mod loader's
config directory.
"""

import logging
from pathlib import Path

from r2import.core.archive import ArchiveReader, normalize_entry_name
from r2import.core.export_format import EXPORT_MANIFEST_NAME
from r2import.core.profile import Profile
from r2import.importer.sequencer import ProgressCallback, progress_percent

logger = logging.getLogger(__name__)

CONFIG_ROOT_MARKERS = ("config/", "config\\")


def extract_imported_profile_configs(
    archive_path: Path,
    profile: Profile,
    loader_config_dir: str,
    reader: ArchiveReader,
    on_progress: ProgressCallback,
) -> None:
    """Copy an export archive's payload files into a profile.

    Args:
        archive_path: The ``*.r2z`` export archive.
        profile: Profile receiving the files.
        loader_config_dir: Profile-relative directory for ``config/`` entries.
        reader: Archive reader.
        on_progress: Receives a status line after every entry.

    Raises:
        ExtractionError: If an entry cannot be extracted.
    """
    entries = reader.get_entries(archive_path)

    for index, entry_name in enumerate(entries):
        if entry_name.startswith(CONFIG_ROOT_MARKERS):
            relative = normalize_entry_name(entry_name)[len("config/") :]
            reader.extract_entry_to(
                archive_path,
                entry_name,
                profile.path / loader_config_dir,
                relative_name=relative,
            )
        elif entry_name.lower() != EXPORT_MANIFEST_NAME:
            reader.extract_entry_to(archive_path, entry_name, profile.path)
        else:
            logger.debug("Skipping export description %s", entry_name)

        on_progress(f"Copying configs to profile: {progress_percent(index, len(entries))}%")

    logger.info("Extracted %d archive entries into profile '%s'", len(entries), profile.name)
