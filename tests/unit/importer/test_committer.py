"""Unit tests for stage-then-commit profile population."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from r2import.core.errors import ExtractionError, InstallError
from r2import.core.settings import Settings
from r2import.importer.committer import populate_imported_profile
from r2import.importer.context import ImportContext
from r2import.installers.cache import CacheInstaller
from r2import.models.export import ExportMod
from r2import.models.version import VersionNumber


def _snapshot(root: Path) -> dict[str, bytes]:
    """Relative path to content for every file below root."""
    return {
        str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()
    }


@pytest.fixture
def context(settings: Settings, fixture_store: Callable) -> ImportContext:
    """Import context with a real installer over the test cache."""
    return ImportContext(
        settings=settings,
        store=fixture_store(),
        installer=CacheInstaller(settings.cache_dir),
    )


@pytest.fixture
def combos(make_combo: Callable, populate_cache: Callable) -> list:
    """Two cached, resolvable mods."""
    populate_cache("Owner-A", "1.0.0")
    populate_cache("Owner-B", "2.1.0")
    return [make_combo("Owner-A", "1.0.0"), make_combo("Owner-B", "2.1.0")]


@pytest.fixture
def export_mods() -> list[ExportMod]:
    """Owner-A enabled, Owner-B disabled."""
    return [
        ExportMod(name="Owner-A", version=VersionNumber(1, 0, 0)),
        ExportMod(name="Owner-B", version=VersionNumber(2, 1, 0), enabled=False),
    ]


@pytest.fixture
def existing_target(settings: Settings) -> Path:
    """A populated target profile that an update would replace."""
    target = settings.profile_root / "Modded"
    (target / "BepInEx" / "config").mkdir(parents=True)
    (target / "BepInEx" / "config" / "old.cfg").write_text("old settings")
    (target / "mods.yml").write_text("[]\n")
    return target


class TestFreshImport:
    """Tests for is_update=False."""

    def test_populates_target_in_place(
        self,
        context: ImportContext,
        combos: list,
        export_mods: list[ExportMod],
        make_archive: Callable[..., Path],
    ) -> None:
        """Mods and configs go straight into the named profile."""
        archive = make_archive([("export.r2x", "x"), ("config/foo.cfg", "foo")])
        on_progress = MagicMock()

        path = populate_imported_profile(
            combos, export_mods, "Modded", False, archive, context, on_progress
        )

        assert path == context.settings.profile_root / "Modded"
        assert (path / "BepInEx" / "plugins" / "Owner-A" / "Owner-A.dll").exists()
        assert (path / "BepInEx" / "plugins" / "Owner-B" / "Owner-B.dll.old").exists()
        assert (path / "BepInEx" / "config" / "foo.cfg").read_text() == "foo"
        assert not context.staging_profile().path.exists()
        statuses = [c.args[0] for c in on_progress.call_args_list]
        assert "Cleaning up..." not in statuses

    def test_without_archive_skips_extraction(
        self, context: ImportContext, combos: list, export_mods: list[ExportMod]
    ) -> None:
        """A plain description has no payload to extract."""
        path = populate_imported_profile(
            combos, export_mods, "Modded", False, None, context, MagicMock()
        )

        assert sorted(p.name for p in path.iterdir()) == ["BepInEx", "mods.yml"]


class TestUpdateSuccess:
    """Tests for a successful update."""

    def test_target_replaced_with_staged_content(
        self,
        context: ImportContext,
        combos: list,
        export_mods: list[ExportMod],
        existing_target: Path,
        make_archive: Callable[..., Path],
    ) -> None:
        """After commit the target holds exactly the populated content."""
        archive = make_archive([("export.r2x", "x"), ("config/new.cfg", "new")])
        on_progress = MagicMock()

        path = populate_imported_profile(
            combos, export_mods, "Modded", True, archive, context, on_progress
        )

        assert path == existing_target
        assert not context.staging_profile().path.exists()
        assert not (existing_target / "BepInEx" / "config" / "old.cfg").exists()
        assert (existing_target / "BepInEx" / "config" / "new.cfg").read_text() == "new"
        mods = context.mod_list.get_mod_list(context.profile("Modded"))
        assert [(m.name, m.enabled) for m in mods] == [("Owner-A", True), ("Owner-B", False)]

        statuses = [c.args[0] for c in on_progress.call_args_list]
        assert statuses[0] == "Cleaning up..."
        assert statuses[-1] == "Applying changes to updated profile..."

    def test_stale_staging_profile_removed_first(
        self,
        context: ImportContext,
        combos: list,
        export_mods: list[ExportMod],
        existing_target: Path,
    ) -> None:
        """Leftovers from a failed attempt do not leak into the result."""
        stale = context.staging_profile().path
        stale.mkdir(parents=True)
        (stale / "leftover.txt").write_text("stale")

        populate_imported_profile(combos, export_mods, "Modded", True, None, context, MagicMock())

        assert not (existing_target / "leftover.txt").exists()

    def test_update_of_missing_target(
        self, context: ImportContext, combos: list, export_mods: list[ExportMod]
    ) -> None:
        """Removing an absent target is a no-op; the rename still commits."""
        path = populate_imported_profile(
            combos, export_mods, "Brand-New", True, None, context, MagicMock()
        )

        assert (path / "mods.yml").exists()
        assert not context.staging_profile().path.exists()


class TestUpdateFailure:
    """Tests for failures during population."""

    def test_install_failure_leaves_target_untouched(
        self,
        context: ImportContext,
        combos: list,
        export_mods: list[ExportMod],
        existing_target: Path,
    ) -> None:
        """An installer failure never reaches the target profile."""
        before = _snapshot(existing_target)
        context.installer = MagicMock(wraps=context.installer)
        context.installer.install_mod.side_effect = [None, InstallError("broken package")]

        with (
            patch("r2import.importer.committer.rename_directory") as mock_rename,
            pytest.raises(InstallError, match="broken package"),
        ):
            populate_imported_profile(
                combos, export_mods, "Modded", True, None, context, MagicMock()
            )

        mock_rename.assert_not_called()
        assert _snapshot(existing_target) == before
        # The partial staging profile is left for the next attempt to clean up
        assert context.staging_profile().path.exists()

    def test_extraction_failure_leaves_target_untouched(
        self,
        context: ImportContext,
        combos: list,
        export_mods: list[ExportMod],
        existing_target: Path,
        tmp_path: Path,
    ) -> None:
        """A broken archive aborts before the commit."""
        before = _snapshot(existing_target)
        broken = tmp_path / "broken.r2z"
        broken.write_text("not a zip")

        with pytest.raises(ExtractionError):
            populate_imported_profile(
                combos, export_mods, "Modded", True, broken, context, MagicMock()
            )

        assert _snapshot(existing_target) == before

    def test_retry_after_failure_succeeds(
        self,
        context: ImportContext,
        combos: list,
        export_mods: list[ExportMod],
        existing_target: Path,
    ) -> None:
        """Re-running the import after a failure commits cleanly."""
        real_installer = context.installer
        context.installer = MagicMock(wraps=real_installer)
        context.installer.install_mod.side_effect = InstallError("flaky")
        with pytest.raises(InstallError):
            populate_imported_profile(
                combos, export_mods, "Modded", True, None, context, MagicMock()
            )

        context.installer = real_installer
        populate_imported_profile(combos, export_mods, "Modded", True, None, context, MagicMock())

        assert not (existing_target / "BepInEx" / "config" / "old.cfg").exists()
        assert (existing_target / "BepInEx" / "plugins" / "Owner-A" / "Owner-A.dll").exists()
