"""Profile identity and directory operations.

A profile is a named directory under the profile root holding installed
mods, their configuration and the profile's mod list.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from r2import.core.errors import InvalidProfileNameError, ProfileFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Profile:
    """A named profile rooted under a profile root directory.

    Attributes:
        name: Profile name, also the directory name.
        root: Directory containing all profiles.
    """

    name: str
    root: Path

    def __post_init__(self) -> None:
        """Reject names that would escape the profile root."""
        if not self.name or self.name in (".", "..") or "/" in self.name or "\\" in self.name:
            raise InvalidProfileNameError(
                f"Invalid profile name: {self.name!r}",
                "Choose a profile name without slashes that is not empty.",
            )

    @property
    def path(self) -> Path:
        """Directory owned by this profile."""
        return self.root / self.name

    def exists(self) -> bool:
        """Check whether the profile directory exists."""
        return self.path.is_dir()


def remove_directory_if_exists(path: Path) -> None:
    """Recursively remove a directory, doing nothing if it is absent.

    Args:
        path: Directory to remove.

    Raises:
        ProfileFileError: If the directory exists but cannot be removed.
    """
    if not path.exists():
        return

    logger.debug("Removing directory %s", path)
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise ProfileFileError(
            f"Failed to remove {path}: {e}",
            "Make sure no other program is using files in the profile.",
        ) from e


def rename_directory(source: Path, destination: Path) -> None:
    """Rename a directory in a single filesystem operation.

    Args:
        source: Existing directory.
        destination: New path; must not exist.

    Raises:
        ProfileFileError: If the rename fails.
    """
    logger.debug("Renaming %s to %s", source, destination)
    try:
        os.rename(source, destination)
    except OSError as e:
        raise ProfileFileError(
            f"Failed to rename {source} to {destination}: {e}",
            "Make sure no other program is using files in the profile.",
        ) from e
