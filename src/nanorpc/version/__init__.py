"""Version descriptors for nanorpc."""

from . import library
from .payload import VersionPayload
from .semver import SemanticVersion

__all__ = [
    "SemanticVersion",
    "VersionPayload",
    "library",
]
