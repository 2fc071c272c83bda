"""Installed mod record.

A ModManifest is the per-mod entry persisted in a profile's mod list. It
is built from a resolved combo at install time and carries the enabled
state the profile should load the mod with.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from r2import.models.package import ResolvedCombo
from r2import.models.version import VersionNumber


class ModManifest(BaseModel):
    """Manifest of a mod installed into a profile.

    Attributes:
        name: Owner-Name identifier of the package.
        author_name: Publishing team.
        display_name: Package name without owner.
        version: Installed version as a dotted string.
        enabled: Whether the mod is loaded by the profile.
        description: Package description.
        website_url: Project website.
        dependencies: Dependency strings of the installed version.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    name: Annotated[str, Field(min_length=1, description="Owner-Name identifier")]
    author_name: Annotated[str, Field(description="Publishing team")] = ""
    display_name: Annotated[str, Field(description="Package name without owner")] = ""
    version: Annotated[str, Field(description="Installed version")]
    enabled: Annotated[bool, Field(description="Whether the mod is enabled")] = True
    description: Annotated[str, Field(description="Package description")] = ""
    website_url: Annotated[str, Field(description="Project website")] = ""
    dependencies: Annotated[
        list[str],
        Field(default_factory=list, description="Dependency strings"),
    ]

    @classmethod
    def from_combo(cls, combo: ResolvedCombo) -> ModManifest:
        """Build an installable manifest from a resolved combo.

        Args:
            combo: Package and version to install.

        Returns:
            New ModManifest, enabled by default.
        """
        return cls(
            name=combo.package.full_name,
            author_name=combo.package.owner,
            display_name=combo.package.name,
            version=str(combo.version.version_number),
            description=combo.version.description,
            website_url=combo.version.website_url,
            dependencies=list(combo.version.dependencies),
        )

    @property
    def version_number(self) -> VersionNumber:
        """Parsed version of this mod."""
        return VersionNumber.parse(self.version)

    def enable(self) -> None:
        """Mark the record enabled (in memory only)."""
        self.enabled = True

    def disable(self) -> None:
        """Mark the record disabled (in memory only)."""
        self.enabled = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary for YAML storage."""
        return self.model_dump(mode="json")
