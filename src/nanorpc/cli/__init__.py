"""Command-line interface for nanorpc."""

from .main import app

__all__ = ["app"]
