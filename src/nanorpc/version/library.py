"""Release identity of the nanorpc library.

Every accessor reads from the single ``LIBRARY_VERSION`` constant, so the
numeric components and the string form cannot drift apart.

Example:
    >>> from nanorpc.version import library
    >>> library.as_string()
    '1.1.1'
    >>> (library.major(), library.minor(), library.patch())
    (1, 1, 1)
"""

from functools import cache
from typing import Final

from ..types import VersionTuple
from .payload import VersionPayload
from .semver import SemanticVersion

LIBRARY_VERSION: Final[SemanticVersion] = SemanticVersion(1, 1, 1)


def major() -> int:
    """Return the library's major version number."""
    return LIBRARY_VERSION.major


def minor() -> int:
    """Return the library's minor version number."""
    return LIBRARY_VERSION.minor


def patch() -> int:
    """Return the library's patch version number."""
    return LIBRARY_VERSION.patch


def as_string() -> str:
    """Return the library version as "major.minor.patch"."""
    return str(LIBRARY_VERSION)


def as_tuple() -> VersionTuple:
    """Return the library version as a ``(major, minor, patch)`` tuple."""
    return LIBRARY_VERSION.as_tuple()


@cache
def as_payload() -> VersionPayload:
    """Return the library version as a validated payload.

    Returns:
        The same frozen VersionPayload on every call.
    """
    return VersionPayload.from_version(LIBRARY_VERSION)
