"""Profile population with stage-then-commit updates.

A fresh import installs straight into the requested profile. An update
builds the new profile under a reserved staging name and only replaces
the target once everything has succeeded, so the target is never seen
half-populated.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from r2import.core.profile import remove_directory_if_exists, rename_directory
from r2import.importer.context import ImportContext
from r2import.importer.extractor import extract_imported_profile_configs
from r2import.importer.sequencer import ProgressCallback, install_mods_to_profile
from r2import.models.export import ExportMod
from r2import.models.package import ResolvedCombo

logger = logging.getLogger(__name__)


def populate_imported_profile(
    combos: Sequence[ResolvedCombo],
    export_mods: Sequence[ExportMod],
    profile_name: str,
    is_update: bool,
    archive_path: Path | None,
    context: ImportContext,
    on_progress: ProgressCallback,
) -> Path:
    """Install mods and extract configs into a profile.

    When updating, the work happens in the staging profile. A leftover
    staging profile from an earlier failed attempt is removed first. On
    success the target is removed and the staging directory renamed to it;
    on failure the target is left untouched and the error propagates.

    Args:
        combos: Resolved combos to install.
        export_mods: Exported mods, used to replay disabled state.
        profile_name: User-visible target profile name.
        is_update: Whether an existing profile is being replaced.
        archive_path: Export archive with payload files, or None for none.
        context: Import collaborators.
        on_progress: Receives human-readable status lines.

    Returns:
        Path of the populated target profile.

    Raises:
        R2ImportError: If any step fails.
    """
    target = context.profile(profile_name)
    profile = context.staging_profile() if is_update else target

    if is_update:
        on_progress("Cleaning up...")
        remove_directory_if_exists(profile.path)

    logger.info("Populating profile '%s' (update=%s)", profile.name, is_update)
    install_mods_to_profile(
        combos,
        export_mods,
        profile,
        context.installer,
        context.mod_list,
        on_progress,
    )

    if archive_path is not None:
        extract_imported_profile_configs(
            archive_path,
            profile,
            context.settings.loader_config_dir,
            context.reader,
            on_progress,
        )

    if is_update:
        on_progress("Applying changes to updated profile...")
        remove_directory_if_exists(target.path)
        rename_directory(profile.path, target.path)
        logger.info("Committed update of profile '%s'", target.name)

    return target.path
