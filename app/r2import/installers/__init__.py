"""Mod installers.

This module provides the installer interface and the cache-backed
implementation used by the import pipeline.
"""

from r2import.installers.base import ModInstaller
from r2import.installers.cache import CacheInstaller

__all__ = [
    "CacheInstaller",
    "ModInstaller",
]
