"""Combo resolution.

Turns the mods of an export description into installable combos for one
community by looking up their dependency strings in a package store.
"""

import logging
from collections.abc import Sequence

from r2import.core.errors import NoImportableModsError
from r2import.models.export import ExportMod
from r2import.models.package import ResolvedCombo
from r2import.stores.base import PackageStore

logger = logging.getLogger(__name__)


def resolve_combos(
    export_mods: Sequence[ExportMod],
    community: str,
    store: PackageStore,
) -> list[ResolvedCombo]:
    """Resolve exported mods to combos for a community.

    The store is queried once for all dependency strings. A partial match
    is returned as-is.

    Args:
        export_mods: Mods from the export description, in order.
        community: Community (game) identifier.
        store: Package store to query.

    Returns:
        Combos found by the store.

    Raises:
        NoImportableModsError: If the store found none of the mods.
    """
    dependency_strings = [mod.dependency_string for mod in export_mods]
    combos = store.get_combos_by_dependency_strings(community, dependency_strings)

    if not combos:
        raise NoImportableModsError(
            "None of the mods or versions listed in the shared profile are available "
            f"for community '{community}'.",
            "Make sure the shared profile is meant for the currently selected game.",
        )

    missing = unresolved_mods(export_mods, combos)
    if missing:
        logger.warning(
            "%d of %d mods could not be resolved: %s",
            len(missing),
            len(export_mods),
            ", ".join(mod.dependency_string for mod in missing),
        )

    logger.info("Resolved %d combos for community '%s'", len(combos), community)
    return combos


def unresolved_mods(
    export_mods: Sequence[ExportMod],
    combos: Sequence[ResolvedCombo],
) -> list[ExportMod]:
    """Return exported mods that have no matching combo.

    Args:
        export_mods: Requested mods.
        combos: Combos returned by the store.

    Returns:
        Requested mods whose dependency string was not resolved, in order.
    """
    resolved = {combo.dependency_string for combo in combos}
    return [mod for mod in export_mods if mod.dependency_string not in resolved]
