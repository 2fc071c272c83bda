"""Package stores.

This module provides the package store interface used to resolve
dependency strings, and a store backed by JSON package listings.
"""

from r2import.stores.base import PackageStore
from r2import.stores.catalog import CatalogPackageStore

__all__ = [
    "CatalogPackageStore",
    "PackageStore",
]
