"""Collaborators shared by the import steps."""

from __future__ import annotations

from dataclasses import dataclass, field

from r2import.core.archive import ArchiveReader
from r2import.core.ledger import ProfileModList
from r2import.core.profile import Profile
from r2import.core.settings import Settings
from r2import.installers.base import ModInstaller
from r2import.installers.cache import CacheInstaller
from r2import.stores.base import PackageStore
from r2import.stores.catalog import CatalogPackageStore


@dataclass(slots=True)
class ImportContext:
    """Settings and collaborators for one import.

    Attributes:
        settings: Paths and reserved names.
        store: Package store resolving dependency strings.
        installer: Installer copying mod files into profiles.
        mod_list: Ledger of installed mods per profile.
        reader: Reader for export archives.
    """

    settings: Settings
    store: PackageStore
    installer: ModInstaller
    mod_list: ProfileModList = field(default_factory=ProfileModList)
    reader: ArchiveReader = field(default_factory=ArchiveReader)

    @classmethod
    def from_settings(cls, settings: Settings) -> ImportContext:
        """Build the default collaborators for the given settings."""
        return cls(
            settings=settings,
            store=CatalogPackageStore(settings.catalog_dir),
            installer=CacheInstaller(settings.cache_dir),
        )

    def profile(self, name: str) -> Profile:
        """Profile with the given name under the configured root."""
        return Profile(name=name, root=self.settings.profile_root)

    def staging_profile(self) -> Profile:
        """The reserved working profile used while updating."""
        return self.profile(self.settings.staging_profile_name)
