"""Abstract base class for package stores.

A package store answers one question: which (package, version) combos
exist for a set of dependency strings in a given community.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from r2import.models.package import ResolvedCombo


class PackageStore(ABC):
    """Abstract base class for all package stores.

    Stores are stateless query interfaces; results depend only on the
    community and the requested dependency strings.

    Example:
        >>> store = CatalogPackageStore(Path("catalog"))
        >>> combos = store.get_combos_by_dependency_strings(
        ...     "riskofrain2", ["bbepis-BepInExPack-5.4.2100"]
        ... )
    """

    @abstractmethod
    def get_combos_by_dependency_strings(
        self,
        community: str,
        dependency_strings: Sequence[str],
    ) -> list[ResolvedCombo]:
        """Resolve dependency strings to combos.

        Args:
            community: Community (game) identifier.
            dependency_strings: Owner-Name-Version strings, in request order.

        Returns:
            Combos found, in request order. Strings with no match are
            left out.
        """
