"""Mod installation sequencing.

Installs resolved combos into a profile one at a time, records them in the
profile's mod list and replays the disabled state from the export.
"""

import logging
from collections.abc import Callable, Sequence

from r2import.core.ledger import ProfileModList
from r2import.core.profile import Profile
from r2import.installers.base import ModInstaller
from r2import.models.export import ExportMod
from r2import.models.mod_manifest import ModManifest
from r2import.models.package import ResolvedCombo

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def progress_percent(index: int, total: int) -> int:
    """Integer percentage for a zero-based index, floored."""
    if total <= 0:
        return 0
    return index * 100 // total


def install_mods_to_profile(
    combos: Sequence[ResolvedCombo],
    export_mods: Sequence[ExportMod],
    profile: Profile,
    installer: ModInstaller,
    mod_list: ProfileModList,
    on_progress: ProgressCallback,
) -> None:
    """Install combos into a profile in order.

    Any installer or mod list failure aborts the sequence and propagates
    unchanged. Mods installed before the failure are not rolled back.

    Args:
        combos: Combos to install, in resolver order.
        export_mods: Exported mods; their enabled flags are replayed by name.
        profile: Profile to install into.
        installer: Installer copying and toggling mod files.
        mod_list: Ledger of the profile's installed mods.
        on_progress: Receives a status line after each mod.

    Raises:
        InstallError: If a mod cannot be installed or disabled.
        LedgerError: If the mod list cannot be updated.
    """
    disabled_mods = {mod.name for mod in export_mods if not mod.enabled}

    for index, combo in enumerate(combos):
        manifest = ModManifest.from_combo(combo)

        installer.install_mod(manifest, profile)
        mod_list.add_mod(manifest, profile)

        if manifest.name in disabled_mods:
            logger.debug("Disabling %s as in the exported profile", manifest.name)

            def disable(record: ModManifest) -> None:
                # disable_mod is a transition from enabled
                record.enable()
                installer.enable_mod(record, profile)
                installer.disable_mod(record, profile)
                record.disable()

            mod_list.update_mod(manifest, profile, disable)

        on_progress(f"Copying mods to profile: {progress_percent(index, len(combos))}%")

    logger.info("Installed %d mods into profile '%s'", len(combos), profile.name)
