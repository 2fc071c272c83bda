"""Unit tests for ArchiveReader."""

from collections.abc import Callable
from pathlib import Path

import pytest
from r2import.core.archive import ArchiveReader, normalize_entry_name
from r2import.core.errors import ExtractionError


class TestArchiveReader:
    """Tests for listing, reading and extracting archive entries."""

    def test_get_entries_in_archive_order(self, make_archive: Callable[..., Path]) -> None:
        """Entries are listed in the order they were written."""
        archive = make_archive([("b.txt", "b"), ("a.txt", "a"), ("config/c.cfg", "c")])

        assert ArchiveReader().get_entries(archive) == ["b.txt", "a.txt", "config/c.cfg"]

    def test_get_entries_bad_archive(self, tmp_path: Path) -> None:
        """A file that is not a zip raises ExtractionError."""
        path = tmp_path / "broken.r2z"
        path.write_text("not a zip")

        with pytest.raises(ExtractionError):
            ArchiveReader().get_entries(path)

    def test_read_file_missing_returns_none(self, make_archive: Callable[..., Path]) -> None:
        """Reading an absent entry returns None."""
        archive = make_archive([("a.txt", "a")])

        assert ArchiveReader().read_file(archive, "export.r2x") is None

    def test_extract_keeps_relative_path(
        self, tmp_path: Path, make_archive: Callable[..., Path]
    ) -> None:
        """Extracted entries keep their directory structure."""
        archive = make_archive([("BepInEx/plugins/x.txt", "payload")])
        target = tmp_path / "out"

        result = ArchiveReader().extract_entry_to(archive, "BepInEx/plugins/x.txt", target)

        assert result == target / "BepInEx" / "plugins" / "x.txt"
        assert result.read_text() == "payload"

    def test_extract_with_relative_name(
        self, tmp_path: Path, make_archive: Callable[..., Path]
    ) -> None:
        """relative_name overrides the destination path."""
        archive = make_archive([("config/foo.cfg", "cfg")])
        target = tmp_path / "out"

        result = ArchiveReader().extract_entry_to(
            archive, "config/foo.cfg", target, relative_name="foo.cfg"
        )

        assert result == target / "foo.cfg"
        assert result.read_text() == "cfg"

    def test_extract_backslash_entry(
        self, tmp_path: Path, make_archive: Callable[..., Path]
    ) -> None:
        """Backslash separators become directories."""
        archive = make_archive([("sub\\file.txt", "data")])
        target = tmp_path / "out"

        result = ArchiveReader().extract_entry_to(archive, "sub\\file.txt", target)

        assert result == target / "sub" / "file.txt"
        assert result.read_text() == "data"

    def test_extract_directory_entry(
        self, tmp_path: Path, make_archive: Callable[..., Path]
    ) -> None:
        """Directory entries create the directory only."""
        archive = make_archive([("emptydir/", "")])
        target = tmp_path / "out"

        result = ArchiveReader().extract_entry_to(archive, "emptydir/", target)

        assert result.is_dir()

    def test_extract_rejects_parent_traversal(
        self, tmp_path: Path, make_archive: Callable[..., Path]
    ) -> None:
        """Entries escaping the target directory are refused."""
        archive = make_archive([("../evil.txt", "x")])

        with pytest.raises(ExtractionError, match="Refusing"):
            ArchiveReader().extract_entry_to(archive, "../evil.txt", tmp_path / "out")

        assert not (tmp_path / "evil.txt").exists()

    def test_extract_missing_entry(
        self, tmp_path: Path, make_archive: Callable[..., Path]
    ) -> None:
        """Unknown entries raise ExtractionError."""
        archive = make_archive([("a.txt", "a")])

        with pytest.raises(ExtractionError, match="not found"):
            ArchiveReader().extract_entry_to(archive, "b.txt", tmp_path / "out")


def test_normalize_entry_name() -> None:
    """Backslashes are converted to forward slashes."""
    assert normalize_entry_name("config\\BepInEx.cfg") == "config/BepInEx.cfg"
