"""Export description reading and parsing.

Exports come in two containers:
- ``*.r2x``: the YAML description itself.
- ``*.r2z``: a zip archive holding the description as ``export.r2x`` plus
  optional payload files such as mod configs.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from r2import.core.archive import ArchiveReader
from r2import.core.errors import FormatError
from r2import.models.export import ExportFormat, ExportMod
from r2import.models.version import VersionNumber

logger = logging.getLogger(__name__)

EXPORT_MANIFEST_NAME = "export.r2x"
EXPORT_FILE_SUFFIX = ".r2x"
EXPORT_ARCHIVE_SUFFIX = ".r2z"

_INVALID_EXPORT_SOLUTION = "Make sure the file is a profile exported by a mod manager."


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    if key not in data or data[key] is None:
        raise FormatError(f"Missing required field '{context}{key}'", _INVALID_EXPORT_SOLUTION)
    return data[key]


def _parse_mod(index: int, raw: object) -> ExportMod:
    """Build an ExportMod from one decoded ``mods`` entry."""
    context = f"mods[{index}]."
    if not isinstance(raw, dict):
        raise FormatError(f"Entry '{context[:-1]}' must be a mapping", _INVALID_EXPORT_SOLUTION)

    name = _require(raw, "name", context)
    if not str(name):
        raise FormatError(f"Field '{context}name' must not be empty", _INVALID_EXPORT_SOLUTION)
    version = _require(raw, "version", context)
    if not isinstance(version, dict):
        raise FormatError(f"Field '{context}version' must be a mapping", _INVALID_EXPORT_SOLUTION)

    major = _require(version, "major", f"{context}version.")
    minor = _require(version, "minor", f"{context}version.")
    patch = _require(version, "patch", f"{context}version.")

    # Missing means enabled; only an explicit falsy value disables
    enabled = "enabled" not in raw or bool(raw["enabled"])

    return ExportMod(
        name=str(name),
        version=VersionNumber.parse(f"{major}.{minor}.{patch}"),
        enabled=enabled,
    )


def parse_export_format(raw_text: str) -> ExportFormat:
    """Decode an export description.

    Args:
        raw_text: YAML text of the description.

    Returns:
        ExportFormat with mods in their listed order.

    Raises:
        FormatError: If the text is not valid YAML or required fields are missing.
        VersionParseError: If a version component is not a non-negative integer.
    """
    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise FormatError(f"Export is not valid YAML: {e}", _INVALID_EXPORT_SOLUTION) from e

    if not isinstance(data, dict):
        raise FormatError("Export description must be a mapping", _INVALID_EXPORT_SOLUTION)

    profile_name = _require(data, "profileName", "")
    mods = _require(data, "mods", "")
    if not isinstance(mods, list):
        raise FormatError("Field 'mods' must be a list", _INVALID_EXPORT_SOLUTION)

    export = ExportFormat(
        profile_name=str(profile_name),
        mods=tuple(_parse_mod(index, raw) for index, raw in enumerate(mods)),
    )
    logger.debug("Parsed export '%s' with %d mods", export.profile_name, len(export.mods))
    return export


def is_export_archive(path: Path) -> bool:
    """Check whether a path names a ``*.r2z`` archive."""
    return path.suffix.lower() == EXPORT_ARCHIVE_SUFFIX


def read_profile_file(path: Path, reader: ArchiveReader | None = None) -> str:
    """Read the export description text from an export file.

    Args:
        path: ``*.r2x`` description or ``*.r2z`` archive.
        reader: Archive reader used for ``*.r2z`` files.

    Returns:
        The YAML text of the description.

    Raises:
        FormatError: If the file type is unknown, unreadable or has no description.
        ExtractionError: If the archive cannot be opened.
    """
    suffix = path.suffix.lower()

    if suffix == EXPORT_FILE_SUFFIX:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FormatError(f"Failed to read {path}: {e}") from e

    if suffix == EXPORT_ARCHIVE_SUFFIX:
        content = (reader or ArchiveReader()).read_file(path, EXPORT_MANIFEST_NAME)
        if content is None:
            raise FormatError(
                f"{path.name} does not contain {EXPORT_MANIFEST_NAME}",
                _INVALID_EXPORT_SOLUTION,
            )
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"{EXPORT_MANIFEST_NAME} is not valid UTF-8: {e}") from e

    raise FormatError(
        f"Unsupported export file type: {path.name}",
        f"Use a {EXPORT_FILE_SUFFIX} or {EXPORT_ARCHIVE_SUFFIX} file.",
    )


def load_export(path: Path, reader: ArchiveReader | None = None) -> ExportFormat:
    """Read and parse an export file."""
    return parse_export_format(read_profile_file(path, reader))
