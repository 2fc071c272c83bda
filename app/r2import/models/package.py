"""Package store models.

This module defines the Pydantic models for package records as they appear
in a community's package listing, and the resolved (package, version) pair
used for installation.
"""

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from r2import.core.errors import VersionParseError
from r2import.models.version import VersionNumber


class PackageVersion(BaseModel):
    """A single published version of a package.

    Attributes:
        name: Package name without owner (e.g., 'BepInExPack').
        full_name: Dependency string of this version (e.g., 'bbepis-BepInExPack-5.4.2100').
        version_number: Parsed version number.
        description: Short package description.
        dependencies: Dependency strings this version requires.
        download_url: Where the package archive can be downloaded.
        website_url: Project website, if any.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: Annotated[str, Field(description="Package name without owner")]
    full_name: Annotated[str, Field(description="Owner-Name-Version identifier")]
    version_number: Annotated[VersionNumber, Field(description="Version number")]
    description: Annotated[str, Field(description="Package description")] = ""
    dependencies: Annotated[
        list[str],
        Field(default_factory=list, description="Required dependency strings"),
    ]
    download_url: Annotated[str, Field(description="Package download URL")] = ""
    website_url: Annotated[str, Field(description="Project website")] = ""

    @field_validator("version_number", mode="before")
    @classmethod
    def parse_version(cls, v: object) -> object:
        """Accept dotted version strings from the listing."""
        if isinstance(v, str):
            try:
                return VersionNumber.parse(v)
            except VersionParseError as e:
                raise ValueError(e.message) from e
        return v


class Package(BaseModel):
    """A package as listed for one community.

    Attributes:
        name: Package name without owner.
        full_name: Owner-Name identifier.
        owner: Team or user that publishes the package.
        is_deprecated: Whether the package is marked deprecated.
        versions: Published versions, newest first.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: Annotated[str, Field(description="Package name without owner")]
    full_name: Annotated[str, Field(description="Owner-Name identifier")]
    owner: Annotated[str, Field(description="Publishing team")]
    is_deprecated: Annotated[bool, Field(description="Deprecated flag")] = False
    versions: Annotated[
        list[PackageVersion],
        Field(default_factory=list, description="Published versions"),
    ]

    def get_version(self, full_name: str) -> PackageVersion | None:
        """Find a version by its full dependency string.

        Args:
            full_name: Dependency string to look up.

        Returns:
            Matching PackageVersion, or None if not published.
        """
        for version in self.versions:
            if version.full_name == full_name:
                return version
        return None


@dataclass(frozen=True, slots=True)
class ResolvedCombo:
    """A package paired with one of its versions, ready to install.

    Attributes:
        package: The resolved package.
        version: The specific version to install.
    """

    package: Package
    version: PackageVersion

    @property
    def dependency_string(self) -> str:
        """Dependency string this combo was resolved from."""
        return self.version.full_name
