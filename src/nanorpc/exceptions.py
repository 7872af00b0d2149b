"""Exceptions raised by nanorpc."""

from typing import Self


class NanoRpcError(Exception):
    """Base exception for all nanorpc errors."""


class InvalidVersionError(NanoRpcError, ValueError):
    """Raised when a version string or component is malformed.

    Attributes:
        version: The offending version text.
    """

    def __init__(self: Self, version: str, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            version: The offending version text.
            reason: Optional detail appended to the message.
        """
        self.version = version
        message = f"Invalid version format: {version}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
