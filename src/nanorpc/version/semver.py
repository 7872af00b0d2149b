"""Semantic version value type."""

import logging
from dataclasses import dataclass
from typing import Self

from ..exceptions import InvalidVersionError
from ..types import VersionLike, VersionTuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """Semantic version representation.

    Attributes:
        major: Major version number (breaking changes).
        minor: Minor version number (backward-compatible features).
        patch: Patch version number (backward-compatible fixes).
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self: Self) -> None:
        """Reject negative components.

        Raises:
            InvalidVersionError: If any component is negative.
        """
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise InvalidVersionError(
                f"{self.major}.{self.minor}.{self.patch}",
                "components must be non-negative",
            )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a semantic version string.

        Args:
            version_str: Version string in format "major.minor.patch".

        Returns:
            Parsed SemanticVersion instance.

        Raises:
            InvalidVersionError: If version string format is invalid.
        """
        parts = version_str.split(".")
        if len(parts) != 3:  # noqa: PLR2004
            logger.debug("Rejecting %r: expected 3 parts", version_str)
            raise InvalidVersionError(version_str)

        # str.isdigit() would accept non-ASCII digits that int() also takes
        if not all(part.isascii() and part.isdigit() for part in parts):
            logger.debug("Rejecting %r: non-numeric component", version_str)
            raise InvalidVersionError(version_str)

        try:
            major, minor, patch = int(parts[0]), int(parts[1]), int(parts[2])
        except ValueError as e:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            logger.debug("Rejecting %r: component too long", version_str)
            raise InvalidVersionError(version_str, "component too long") from e

        return cls(major, minor, patch)

    @classmethod
    def coerce(cls, value: VersionLike) -> "SemanticVersion":
        """Return ``value`` as a SemanticVersion, parsing strings.

        Args:
            value: A version string or SemanticVersion.

        Returns:
            The equivalent SemanticVersion.
        """
        return cls.parse(value) if isinstance(value, str) else value

    def as_tuple(self: Self) -> VersionTuple:
        """Return the version as a ``(major, minor, patch)`` tuple."""
        return (self.major, self.minor, self.patch)

    def is_compatible_with(self: Self, other: VersionLike) -> bool:
        """Check whether another version is compatible with this one.

        Compatible means the same major version.

        Args:
            other: Version to compare against.

        Returns:
            True if both versions share a major number.

        Raises:
            InvalidVersionError: If ``other`` is a malformed string.
        """
        other_ver = self.coerce(other)
        compatible = other_ver.major == self.major
        logger.debug(
            "Version %s %s compatible with %s",
            other_ver,
            "is" if compatible else "is not",
            self,
        )
        return compatible

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch".
        """
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"SemanticVersion({self.major}, {self.minor}, {self.patch})"
