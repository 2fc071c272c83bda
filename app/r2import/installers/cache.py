"""Installer copying mods from the local package cache.

Packages are expected unpacked in the cache as ``<cache>/<name>/<version>/``.
Installed files go to ``<profile>/BepInEx/plugins/<name>/``. Disabled files
keep their place and get an ``.old`` suffix.
"""

import logging
import shutil
from pathlib import Path

from r2import.core.errors import InstallError
from r2import.core.profile import Profile
from r2import.installers.base import ModInstaller
from r2import.models.mod_manifest import ModManifest

logger = logging.getLogger(__name__)

DEFAULT_PLUGINS_DIR = "BepInEx/plugins"
DISABLED_SUFFIX = ".old"


class CacheInstaller(ModInstaller):
    """Installs mods from an unpacked package cache.

    Attributes:
        _cache_dir: Root of the package cache.
        _plugins_dir: Profile-relative directory receiving mod files.
    """

    def __init__(self, cache_dir: Path, plugins_dir: str = DEFAULT_PLUGINS_DIR) -> None:
        """Initialize the installer.

        Args:
            cache_dir: Directory holding ``<name>/<version>/`` package trees.
            plugins_dir: Profile-relative directory for installed mod files.
        """
        self._cache_dir = cache_dir
        self._plugins_dir = plugins_dir

    def cached_package_path(self, mod: ModManifest) -> Path:
        """Cache location of a mod's unpacked files."""
        return self._cache_dir / mod.name / mod.version

    def installed_path(self, mod: ModManifest, profile: Profile) -> Path:
        """Profile location of a mod's installed files."""
        return profile.path / self._plugins_dir / mod.name

    def install_mod(self, mod: ModManifest, profile: Profile) -> None:
        """Copy a cached package into a profile.

        Raises:
            InstallError: If the package is not cached or cannot be copied.
        """
        source = self.cached_package_path(mod)
        if not source.is_dir():
            raise InstallError(
                f"{mod.name} {mod.version} is not in the package cache ({source})",
                "Download the mod before importing the profile.",
            )

        destination = self.installed_path(mod, profile)
        logger.debug("Installing %s %s to %s", mod.name, mod.version, destination)
        try:
            if destination.exists():
                shutil.rmtree(destination)
            shutil.copytree(source, destination)
        except OSError as e:
            raise InstallError(f"Failed to copy {mod.name} into {profile.name}: {e}") from e

    def enable_mod(self, mod: ModManifest, profile: Profile) -> None:
        """Strip the disabled suffix from a mod's files."""
        if mod.enabled:
            return

        for path in self._installed_files(mod, profile):
            if path.name.endswith(DISABLED_SUFFIX):
                self._rename(path, path.with_name(path.name[: -len(DISABLED_SUFFIX)]))

    def disable_mod(self, mod: ModManifest, profile: Profile) -> None:
        """Add the disabled suffix to a mod's files."""
        if not mod.enabled:
            logger.debug("%s is already disabled, nothing to do", mod.name)
            return

        for path in self._installed_files(mod, profile):
            if not path.name.endswith(DISABLED_SUFFIX):
                self._rename(path, path.with_name(path.name + DISABLED_SUFFIX))

    def _installed_files(self, mod: ModManifest, profile: Profile) -> list[Path]:
        root = self.installed_path(mod, profile)
        if not root.is_dir():
            raise InstallError(f"{mod.name} is not installed in profile {profile.name}")
        return sorted(p for p in root.rglob("*") if p.is_file())

    def _rename(self, source: Path, destination: Path) -> None:
        try:
            source.rename(destination)
        except OSError as e:
            raise InstallError(f"Failed to rename {source}: {e}") from e
