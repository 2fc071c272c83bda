"""Semantic version numbers used by packages and exports."""

from __future__ import annotations

import re
from dataclasses import dataclass

from r2import.core.errors import VersionParseError

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, slots=True, order=True)
class VersionNumber:
    """A major.minor.patch version.

    Attributes:
        major: Major version component.
        minor: Minor version component.
        patch: Patch version component.
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        """Validate that all components are non-negative."""
        if min(self.major, self.minor, self.patch) < 0:
            msg = f"Version components cannot be negative: {self.major}.{self.minor}.{self.patch}"
            raise VersionParseError(msg)

    @classmethod
    def parse(cls, text: str) -> VersionNumber:
        """Parse a dotted version string.

        Args:
            text: Version string such as "1.2.3".

        Returns:
            VersionNumber instance.

        Raises:
            VersionParseError: If the string is not three dot-separated integers.
        """
        match = _VERSION_PATTERN.match(text.strip())
        if match is None:
            raise VersionParseError(
                f'"{text}" is not a valid version number',
                "Versions must have the form major.minor.patch.",
            )
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
