"""Logging setup for command-line entry points."""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", format_string: str | None = None) -> None:
    """Configure root logging to stderr.

    Library modules never call this; only entry points do. Existing root
    handlers are replaced so repeated calls in one process take effect.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        format_string: Custom format string (uses default if None).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
