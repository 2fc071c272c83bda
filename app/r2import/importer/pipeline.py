"""End-to-end profile import."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from r2import.core.errors import ProfileExistsError
from r2import.core.export_format import is_export_archive, load_export
from r2import.core.resolver import resolve_combos, unresolved_mods
from r2import.importer.committer import populate_imported_profile
from r2import.importer.context import ImportContext
from r2import.importer.sequencer import ProgressCallback

logger = logging.getLogger(__name__)


def _ignore_progress(status: str) -> None:
    """Default progress sink."""


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Outcome of a successful import.

    Attributes:
        profile_name: Name of the imported profile.
        profile_path: Directory of the imported profile.
        installed: Names of installed mods, in install order.
        unresolved: Dependency strings that could not be resolved.
    """

    profile_name: str
    profile_path: Path
    installed: tuple[str, ...] = field(default_factory=tuple)
    unresolved: tuple[str, ...] = field(default_factory=tuple)


def import_profile(
    source: Path,
    community: str,
    context: ImportContext,
    *,
    profile_name: str | None = None,
    is_update: bool = False,
    on_progress: ProgressCallback = _ignore_progress,
) -> ImportResult:
    """Import an exported profile.

    Args:
        source: ``*.r2x`` description or ``*.r2z`` archive.
        community: Community (game) the profile targets.
        context: Import collaborators.
        profile_name: Target profile name; defaults to the exported name.
        is_update: Replace an existing profile atomically.
        on_progress: Receives human-readable status lines.

    Returns:
        ImportResult describing the imported profile.

    Raises:
        ProfileExistsError: If a fresh import targets an existing profile.
        R2ImportError: If reading, resolving or populating fails.
    """
    export = load_export(source, context.reader)
    name = profile_name or export.profile_name

    if name == context.settings.staging_profile_name:
        raise ProfileExistsError(
            f"'{name}' is reserved for profile updates",
            "Choose a different profile name.",
        )

    target = context.profile(name)
    if not is_update and target.exists():
        raise ProfileExistsError(
            f"Profile '{name}' already exists",
            "Import as an update to replace it, or choose a different name.",
        )

    combos = resolve_combos(export.mods, community, context.store)

    archive_path = source if is_export_archive(source) else None
    profile_path = populate_imported_profile(
        combos,
        export.mods,
        name,
        is_update,
        archive_path,
        context,
        on_progress,
    )

    return ImportResult(
        profile_name=name,
        profile_path=profile_path,
        installed=tuple(combo.package.full_name for combo in combos),
        unresolved=tuple(mod.dependency_string for mod in unresolved_mods(export.mods, combos)),
    )
