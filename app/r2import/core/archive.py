"""Archive reader for exported profiles.

Exported ``*.r2z`` profiles are zip archives. Entry names written on
Windows may use backslash separators; they are normalised to forward
slashes before extraction.
"""

import logging
import shutil
import zipfile
from pathlib import Path, PurePosixPath

from r2import.core.errors import ExtractionError

logger = logging.getLogger(__name__)


def normalize_entry_name(entry_name: str) -> str:
    """Convert backslash separators in an entry name to forward slashes."""
    return entry_name.replace("\\", "/")


class ArchiveReader:
    """Lists, reads and extracts entries of a zip archive."""

    def get_entries(self, archive_path: Path) -> list[str]:
        """List entry names in archive order.

        Args:
            archive_path: Path to the archive.

        Returns:
            Raw entry names, directories included.

        Raises:
            ExtractionError: If the archive cannot be opened.
        """
        try:
            with zipfile.ZipFile(archive_path) as archive:
                return archive.namelist()
        except (OSError, zipfile.BadZipFile) as e:
            raise ExtractionError(f"Failed to read archive {archive_path}: {e}") from e

    def read_file(self, archive_path: Path, entry_name: str) -> bytes | None:
        """Read an entry by name, ignoring case.

        Args:
            archive_path: Path to the archive.
            entry_name: Entry to read.

        Returns:
            Entry content, or None if the archive has no such entry.

        Raises:
            ExtractionError: If the archive cannot be read.
        """
        wanted = normalize_entry_name(entry_name).lower()
        try:
            with zipfile.ZipFile(archive_path) as archive:
                for info in archive.infolist():
                    if normalize_entry_name(info.filename).lower() == wanted:
                        return archive.read(info)
        except (OSError, zipfile.BadZipFile) as e:
            raise ExtractionError(f"Failed to read archive {archive_path}: {e}") from e
        return None

    def extract_entry_to(
        self,
        archive_path: Path,
        entry_name: str,
        target_dir: Path,
        relative_name: str | None = None,
    ) -> Path:
        """Extract a single entry below a target directory.

        The entry keeps its relative path unless relative_name is given.
        Directory entries only create the directory.

        Args:
            archive_path: Path to the archive.
            entry_name: Raw entry name as listed by get_entries().
            target_dir: Directory the relative path is joined to.
            relative_name: Path to use below target_dir instead of the entry name.

        Returns:
            Path of the extracted file or directory.

        Raises:
            ExtractionError: If the entry is unsafe or cannot be extracted.
        """
        relative = PurePosixPath(
            normalize_entry_name(entry_name if relative_name is None else relative_name)
        )
        if relative.is_absolute() or ".." in relative.parts:
            raise ExtractionError(
                f"Refusing to extract {entry_name!r} outside of {target_dir}",
                "The export file may be corrupted or malicious.",
            )

        destination = target_dir.joinpath(*relative.parts)
        logger.debug("Extracting %s to %s", entry_name, destination)

        try:
            with zipfile.ZipFile(archive_path) as archive:
                info = archive.getinfo(entry_name)
                if info.is_dir() or entry_name.endswith(("/", "\\")):
                    destination.mkdir(parents=True, exist_ok=True)
                    return destination
                destination.parent.mkdir(parents=True, exist_ok=True)
                with archive.open(info) as src, open(destination, "wb") as dst:
                    shutil.copyfileobj(src, dst)
        except KeyError as e:
            raise ExtractionError(f"Entry {entry_name!r} not found in {archive_path}") from e
        except (OSError, zipfile.BadZipFile) as e:
            raise ExtractionError(f"Failed to extract {entry_name!r}: {e}") from e

        return destination
