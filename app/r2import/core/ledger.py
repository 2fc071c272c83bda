"""Profile mod-list ledger.

Each profile keeps the manifests of its installed mods in ``mods.yml`` at
the root of the profile directory, in installation order.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from tempfile import NamedTemporaryFile

import yaml
from pydantic import ValidationError

from r2import.core.errors import LedgerError
from r2import.core.profile import Profile
from r2import.models.mod_manifest import ModManifest

logger = logging.getLogger(__name__)

MOD_LIST_FILENAME = "mods.yml"


class ProfileModList:
    """Reads and writes the mod list of a profile."""

    def mod_list_path(self, profile: Profile) -> Path:
        """Path to the profile's mods.yml."""
        return profile.path / MOD_LIST_FILENAME

    def get_mod_list(self, profile: Profile) -> list[ModManifest]:
        """Load the installed mods of a profile.

        Args:
            profile: Profile to read.

        Returns:
            Installed mod manifests in order; empty if the file is missing.

        Raises:
            LedgerError: If the file cannot be read or is malformed.
        """
        path = self.mod_list_path(profile)
        if not path.exists():
            return []

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerError(f"Failed to read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise LedgerError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise LedgerError(f"Mod list {path} must be a list of mods")

        try:
            return [ModManifest.model_validate(item) for item in data]
        except ValidationError as e:
            raise LedgerError(f"Invalid mod entry in {path}: {e}") from e

    def save_mod_list(self, mods: list[ModManifest], profile: Profile) -> None:
        """Write the mod list of a profile atomically.

        Raises:
            LedgerError: If the file cannot be written.
        """
        path = self.mod_list_path(profile)
        data = [mod.to_dict() for mod in mods]

        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
            os.replace(str(tmp_path), str(path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise LedgerError(f"Failed to write {path}: {e}") from e

    def add_mod(self, mod: ModManifest, profile: Profile) -> list[ModManifest]:
        """Record a mod in the profile's mod list.

        A record with the same name is replaced in place; otherwise the mod
        is appended.

        Args:
            mod: Manifest of the installed mod.
            profile: Profile the mod was installed into.

        Returns:
            The updated mod list.

        Raises:
            LedgerError: If the mod list cannot be read or written.
        """
        mods = self.get_mod_list(profile)
        for index, existing in enumerate(mods):
            if existing.name == mod.name:
                mods[index] = mod.model_copy()
                break
        else:
            mods.append(mod.model_copy())

        self.save_mod_list(mods, profile)
        logger.debug("Added %s %s to %s", mod.name, mod.version, profile.name)
        return mods

    def update_mod(
        self,
        mod: ModManifest,
        profile: Profile,
        apply: Callable[[ModManifest], None],
    ) -> list[ModManifest]:
        """Apply a change to a recorded mod and save the mod list.

        Args:
            mod: Mod to update, matched by name.
            profile: Profile holding the mod.
            apply: Callback receiving the stored record to mutate.

        Returns:
            The updated mod list.

        Raises:
            LedgerError: If the mod is not recorded or the list cannot be saved.
        """
        mods = self.get_mod_list(profile)
        for existing in mods:
            if existing.name == mod.name:
                apply(existing)
                break
        else:
            raise LedgerError(f"{mod.name} is not installed in profile {profile.name}")

        self.save_mod_list(mods, profile)
        return mods
