"""nanorpc - release identity of the nanorpc library.

Exposes the fixed library version as numeric components, a canonical
"major.minor.patch" string and a validated payload for diagnostics.
"""

from .exceptions import InvalidVersionError, NanoRpcError
from .types import VersionLike, VersionTuple
from .version import SemanticVersion, VersionPayload, library
from .version.library import (
    LIBRARY_VERSION,
    as_payload,
    as_string,
    as_tuple,
    major,
    minor,
    patch,
)

__version__ = as_string()

__all__ = [
    "LIBRARY_VERSION",
    "InvalidVersionError",
    "NanoRpcError",
    "SemanticVersion",
    "VersionLike",
    "VersionPayload",
    "VersionTuple",
    "__version__",
    "as_payload",
    "as_string",
    "as_tuple",
    "library",
    "major",
    "minor",
    "patch",
]
