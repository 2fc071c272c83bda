"""Abstract base class for mod installers.

This module defines the ModInstaller interface that copies a package's
files into a profile and toggles them on and off.
"""

from abc import ABC, abstractmethod

from r2import.core.profile import Profile
from r2import.models.mod_manifest import ModManifest


class ModInstaller(ABC):
    """Abstract base class for all mod installers.

    enable_mod() and disable_mod() are state transitions: they act on the
    record's current ``enabled`` flag and do nothing when the record is
    already in the target state. They do not change the flag themselves.
    """

    @abstractmethod
    def install_mod(self, mod: ModManifest, profile: Profile) -> None:
        """Copy a mod's files into a profile.

        Raises:
            InstallError: If the mod cannot be installed.
        """

    @abstractmethod
    def enable_mod(self, mod: ModManifest, profile: Profile) -> None:
        """Re-enable the files of a disabled mod.

        Raises:
            InstallError: If the files cannot be enabled.
        """

    @abstractmethod
    def disable_mod(self, mod: ModManifest, profile: Profile) -> None:
        """Disable the files of an enabled mod.

        Raises:
            InstallError: If the files cannot be disabled.
        """
