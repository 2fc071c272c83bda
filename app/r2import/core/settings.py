"""Import settings.

Settings are stored in ~/.config/r2import/settings.toml. Every field has
a default, so a missing file is not an error.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from r2import.core.errors import SettingsError
from r2import.core.paths import (
    get_default_cache_dir,
    get_default_catalog_dir,
    get_default_profile_root,
    get_settings_path,
)

DEFAULT_LOADER_CONFIG_DIR = "BepInEx/config"
DEFAULT_STAGING_PROFILE_NAME = "_profile_update"


class Settings(BaseModel):
    """Configuration for profile imports.

    Attributes:
        profile_root: Directory containing one subdirectory per profile.
        cache_dir: Directory containing unpacked packages.
        catalog_dir: Directory containing per-community package listings.
        loader_config_dir: Profile-relative mod-loader config root for config/ entries.
        staging_profile_name: Reserved profile name used while updating.
    """

    model_config = ConfigDict(extra="forbid")

    profile_root: Annotated[
        Path,
        Field(default_factory=get_default_profile_root, description="Profile root directory"),
    ]
    cache_dir: Annotated[
        Path,
        Field(default_factory=get_default_cache_dir, description="Package cache directory"),
    ]
    catalog_dir: Annotated[
        Path,
        Field(default_factory=get_default_catalog_dir, description="Package catalog directory"),
    ]
    loader_config_dir: Annotated[
        str,
        Field(min_length=1, description="Mod loader directory for config entries"),
    ] = DEFAULT_LOADER_CONFIG_DIR
    staging_profile_name: Annotated[
        str,
        Field(min_length=1, description="Reserved staging profile name"),
    ] = DEFAULT_STAGING_PROFILE_NAME

    @field_validator("profile_root", "cache_dir", "catalog_dir", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        """Expand ~ in configured paths."""
        return v.expanduser()


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings; defaults if the file does not exist.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(
            f"Invalid settings content: {e}",
            f"Fix or remove {settings_path}.",
        ) from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and then
    moved into place with os.replace().

    Args:
        settings: Settings to save.
        path: Destination path. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
