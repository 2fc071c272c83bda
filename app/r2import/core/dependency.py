"""Dependency string helpers.

A dependency string identifies one version of a package across systems.
Exports compose it as ``{name}-{version}`` where ``name`` is already the
``Owner-Name`` identifier, so the full form is ``Owner-Name-1.2.3``.
"""

from r2import.core.errors import InvalidDependencyStringError


def compose_dependency_string(name: str, version: object) -> str:
    """Build a dependency string from a package name and version.

    Args:
        name: Package identifier in ``Owner-Name`` form.
        version: Version number; converted with ``str()``.

    Returns:
        Dependency string such as ``Owner-Name-1.2.3``.
    """
    return f"{name}-{version}"


def split_to_name_and_version(dependency_string: str) -> tuple[str, str]:
    """Split an ``Owner-Name-Version`` string into name and version.

    Args:
        dependency_string: String containing exactly two hyphens.

    Returns:
        Tuple of (``Owner-Name``, ``Version``).

    Raises:
        InvalidDependencyStringError: If the string does not have three parts.
    """
    parts = dependency_string.split("-")

    if len(parts) != 3:
        raise InvalidDependencyStringError(f'Invalid dependency string "{dependency_string}"')

    return f"{parts[0]}-{parts[1]}", parts[2]
