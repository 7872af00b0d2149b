"""Serializable form of a version descriptor."""

from typing import Self

from pydantic import BaseModel, ConfigDict, NonNegativeInt, model_validator

from .semver import SemanticVersion


class VersionPayload(BaseModel):
    """Version descriptor as embedded in diagnostics and handshake messages.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        version: Canonical "major.minor.patch" text.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: NonNegativeInt
    minor: NonNegativeInt
    patch: NonNegativeInt
    version: str

    @model_validator(mode="after")
    def _check_display(self: Self) -> Self:
        expected = f"{self.major}.{self.minor}.{self.patch}"
        if self.version != expected:
            raise ValueError(
                f"version {self.version!r} does not match components {expected!r}"
            )
        return self

    @classmethod
    def from_version(cls, version: SemanticVersion) -> Self:
        """Build a payload from a SemanticVersion.

        Args:
            version: Version to describe.

        Returns:
            Payload whose fields agree with ``version``.
        """
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            version=str(version),
        )

    def to_version(self: Self) -> SemanticVersion:
        """Return the equivalent SemanticVersion."""
        return SemanticVersion(self.major, self.minor, self.patch)
