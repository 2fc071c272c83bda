"""Export description models.

An export description is the serialized record of a shared profile:
the profile name plus the ordered list of mods it contained.
"""

from dataclasses import dataclass, field

from r2import.core.dependency import compose_dependency_string
from r2import.models.version import VersionNumber


@dataclass(frozen=True, slots=True)
class ExportMod:
    """A single mod listed in an export description.

    Attributes:
        name: Package identifier (e.g., 'bbepis-BepInExPack').
        version: Exported package version.
        enabled: Whether the mod was enabled in the exported profile.
    """

    name: str
    version: VersionNumber
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate mod data after initialization."""
        if not self.name:
            msg = "Mod name cannot be empty"
            raise ValueError(msg)

    @property
    def dependency_string(self) -> str:
        """Return the dependency string used to resolve this mod."""
        return compose_dependency_string(self.name, self.version)


@dataclass(frozen=True, slots=True)
class ExportFormat:
    """Decoded shared-profile description.

    Attributes:
        profile_name: Name of the exported profile.
        mods: Exported mods in their original order.
    """

    profile_name: str
    mods: tuple[ExportMod, ...] = field(default_factory=tuple)

    @property
    def disabled_mod_names(self) -> set[str]:
        """Names of mods that were disabled in the exported profile."""
        return {mod.name for mod in self.mods if not mod.enabled}
