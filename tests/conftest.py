"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
import zipfile
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from r2import.core.settings import Settings
from r2import.models.package import Package, PackageVersion, ResolvedCombo
from r2import.stores.base import PackageStore


class FixtureStore(PackageStore):
    """In-memory package store resolving from a fixed list of combos."""

    def __init__(self, combos: Sequence[ResolvedCombo]) -> None:
        self._combos = {combo.dependency_string: combo for combo in combos}
        self.queries: list[tuple[str, list[str]]] = []

    def get_combos_by_dependency_strings(
        self,
        community: str,
        dependency_strings: Sequence[str],
    ) -> list[ResolvedCombo]:
        self.queries.append((community, list(dependency_strings)))
        return [self._combos[s] for s in dependency_strings if s in self._combos]


def package_listing(full_name: str, *versions: str) -> dict[str, object]:
    """Build one package entry in the package index JSON layout."""
    owner, name = full_name.split("-", 1)
    return {
        "name": name,
        "full_name": full_name,
        "owner": owner,
        "package_url": f"https://example.invalid/package/{owner}/{name}/",
        "is_deprecated": False,
        "versions": [
            {
                "name": name,
                "full_name": f"{full_name}-{version}",
                "description": f"{name} mod",
                "version_number": version,
                "dependencies": [],
                "download_url": f"https://example.invalid/download/{owner}/{name}/{version}/",
                "website_url": "",
            }
            for version in versions
        ],
    }


@pytest.fixture
def make_combo() -> Callable[[str, str], ResolvedCombo]:
    """Factory building a ResolvedCombo for an Owner-Name and version."""

    def _make(full_name: str, version: str) -> ResolvedCombo:
        data = package_listing(full_name, version)
        package = Package.model_validate(data)
        return ResolvedCombo(package=package, version=package.versions[0])

    return _make


@pytest.fixture
def fixture_store() -> Callable[..., FixtureStore]:
    """Factory building an in-memory store from combos."""

    def _make(*combos: ResolvedCombo) -> FixtureStore:
        return FixtureStore(combos)

    return _make


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing every directory into tmp_path."""
    return Settings(
        profile_root=tmp_path / "profiles",
        cache_dir=tmp_path / "cache",
        catalog_dir=tmp_path / "catalog",
    )


@pytest.fixture
def sample_export_text() -> str:
    """Export description with one enabled and one disabled mod."""
    return """profileName: Modded
mods:
  - name: Owner-A
    version:
      major: 1
      minor: 0
      patch: 0
    enabled: true
  - name: Owner-B
    version:
      major: 2
      minor: 1
      patch: 0
    enabled: false
"""


@pytest.fixture
def write_catalog(settings: Settings) -> Callable[..., Path]:
    """Write a community listing into the settings' catalog directory."""

    def _write(community: str, *packages: dict[str, object]) -> Path:
        settings.catalog_dir.mkdir(parents=True, exist_ok=True)
        path = settings.catalog_dir / f"{community}.json"
        path.write_text(json.dumps(list(packages)), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def populate_cache(settings: Settings) -> Callable[[str, str], Path]:
    """Create an unpacked package in the settings' cache directory."""

    def _populate(full_name: str, version: str) -> Path:
        root = settings.cache_dir / full_name / version
        root.mkdir(parents=True, exist_ok=True)
        (root / f"{full_name}.dll").write_bytes(b"\x00dll")
        (root / "manifest.json").write_text("{}", encoding="utf-8")
        return root

    return _populate


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Write a zip archive from (entry name, content) pairs."""

    def _make(entries: Sequence[tuple[str, str]], name: str = "shared.r2z") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for entry_name, content in entries:
                archive.writestr(entry_name, content)
        return path

    return _make


@pytest.fixture
def catalog_entry() -> Callable[..., dict[str, object]]:
    """Factory for package index entries."""
    return package_listing
