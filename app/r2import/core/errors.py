"""Exception hierarchy for profile imports.

Every error raised by the import pipeline derives from R2ImportError and
carries a short name, a detail message and a suggested solution, so the
CLI can render a single terminating error for the whole operation.
"""


class R2ImportError(Exception):
    """Base exception for all profile import errors.

    Attributes:
        name: Short, user-facing error title.
        message: Detail describing what went wrong.
        solution: Suggested remedy for the user (may be empty).
    """

    default_name = "Import failed"

    def __init__(self, message: str, solution: str = "", name: str | None = None) -> None:
        super().__init__(message)
        self.name = name or self.default_name
        self.message = message
        self.solution = solution

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


class FormatError(R2ImportError):
    """Raised when an export description is not valid."""

    default_name = "Invalid export file"


class VersionParseError(FormatError):
    """Raised when a version number is malformed."""

    default_name = "Invalid version number"


class InvalidDependencyStringError(R2ImportError):
    """Raised when a dependency string is not of the Owner-Name-Version form."""

    default_name = "Invalid dependency string"


class NoImportableModsError(R2ImportError):
    """Raised when none of the exported mods resolve for a community."""

    default_name = "No importable mods found"


class InstallError(R2ImportError):
    """Raised when a mod cannot be installed into a profile."""

    default_name = "Failed to install mod"


class LedgerError(R2ImportError):
    """Raised when a profile's mod list cannot be read or written."""

    default_name = "Failed to update mod list"


class ExtractionError(R2ImportError):
    """Raised when an archive entry cannot be read or extracted."""

    default_name = "Failed to extract file"


class ProfileFileError(R2ImportError):
    """Raised when a profile directory cannot be removed or renamed."""

    default_name = "Profile file operation failed"


class ProfileExistsError(R2ImportError):
    """Raised when a fresh import targets an existing profile."""

    default_name = "Profile already exists"


class InvalidProfileNameError(R2ImportError):
    """Raised when a profile name is not a single directory name."""

    default_name = "Invalid profile name"


class CatalogError(R2ImportError):
    """Raised when a package catalog file cannot be loaded."""

    default_name = "Invalid package catalog"


class SettingsError(R2ImportError):
    """Raised when the settings file cannot be read or written."""

    default_name = "Invalid settings"
