"""XDG-compliant path management for r2import.

XDG defaults:
- Config: ~/.config/r2import/
- Data: ~/.local/share/r2import/ (profiles, mod cache, package catalog)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "r2import"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/r2import/ (or XDG_CONFIG_HOME/r2import/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the data directory path.

    Returns:
        Path to ~/.local/share/r2import/ (or XDG_DATA_HOME/r2import/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/r2import/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_default_profile_root() -> Path:
    """Directory holding one subdirectory per profile."""
    return get_data_dir() / "profiles"


def get_default_cache_dir() -> Path:
    """Directory holding unpacked packages as <name>/<version>/."""
    return get_data_dir() / "cache"


def get_default_catalog_dir() -> Path:
    """Directory holding one <community>.json package listing per community."""
    return get_data_dir() / "catalog"
