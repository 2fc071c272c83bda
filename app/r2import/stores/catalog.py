"""Package store backed by JSON package listings.

Each community has one ``<community>.json`` file holding the package list
in the package index's ``/api/v1/package/`` layout.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from r2import.core.dependency import split_to_name_and_version
from r2import.core.errors import CatalogError, InvalidDependencyStringError
from r2import.models.package import Package, ResolvedCombo
from r2import.stores.base import PackageStore

logger = logging.getLogger(__name__)

_PACKAGE_LIST = TypeAdapter(list[Package])


class CatalogPackageStore(PackageStore):
    """Resolves combos from per-community JSON listings.

    Attributes:
        _catalog_dir: Directory holding the listings.
    """

    def __init__(self, catalog_dir: Path) -> None:
        """Initialize the store.

        Args:
            catalog_dir: Directory containing ``<community>.json`` files.
        """
        self._catalog_dir = catalog_dir

    def listing_path(self, community: str) -> Path:
        """Path of a community's listing."""
        return self._catalog_dir / f"{community}.json"

    def load_packages(self, community: str) -> list[Package]:
        """Load all packages listed for a community.

        Args:
            community: Community identifier.

        Returns:
            Listed packages; empty if the community has no listing.

        Raises:
            CatalogError: If the listing cannot be read or validated.
        """
        path = self.listing_path(community)
        if not path.exists():
            logger.warning("No package listing for community '%s' at %s", community, path)
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Failed to read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in {path}: {e}") from e

        try:
            return _PACKAGE_LIST.validate_python(data)
        except ValidationError as e:
            raise CatalogError(f"Invalid package listing {path}: {e}") from e

    def get_combos_by_dependency_strings(
        self,
        community: str,
        dependency_strings: Sequence[str],
    ) -> list[ResolvedCombo]:
        """Resolve dependency strings against the community listing.

        Args:
            community: Community identifier.
            dependency_strings: Owner-Name-Version strings, in request order.

        Returns:
            One combo per matched string, in request order.

        Raises:
            CatalogError: If the listing cannot be loaded.
        """
        packages = {package.full_name: package for package in self.load_packages(community)}

        combos: list[ResolvedCombo] = []
        for dependency_string in dependency_strings:
            try:
                name, _ = split_to_name_and_version(dependency_string)
            except InvalidDependencyStringError:
                logger.warning("Skipping malformed dependency string '%s'", dependency_string)
                continue

            package = packages.get(name)
            version = package.get_version(dependency_string) if package else None
            if version is not None:
                combos.append(ResolvedCombo(package=package, version=version))

        return combos
