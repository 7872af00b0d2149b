"""Command-line interface for nanorpc."""

import logging
from typing import Annotated

import typer
from rich.table import Table

from .._logging import setup_logging
from ..exceptions import NanoRpcError
from ..version import SemanticVersion, library
from ._helpers import console, print_error, print_failure, print_success

logger = logging.getLogger(__name__)

app = typer.Typer(help="Release identity of the nanorpc library")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Inspect the nanorpc library version."""
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command()
def version(
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the version payload as JSON")
    ] = False,
) -> None:
    """Print the library version."""
    if as_json:
        # Plain print keeps rich from re-highlighting the JSON
        print(library.as_payload().model_dump_json())
    else:
        print(library.as_string())


@app.command()
def info() -> None:
    """Show the library version components."""
    table = Table(title="nanorpc")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("major", str(library.major()))
    table.add_row("minor", str(library.minor()))
    table.add_row("patch", str(library.patch()))
    table.add_row("version", library.as_string())

    console.print(table)


# Lets "-1.0.0" reach the argument so it is rejected as a version, not an option
@app.command(context_settings={"ignore_unknown_options": True})
def check(
    peer: Annotated[str, typer.Argument(..., help="Peer version (major.minor.patch)")],
) -> None:
    """Check whether a peer version is compatible with this library."""
    try:
        peer_version = SemanticVersion.parse(peer)
        logger.debug("Checking peer %s against %s", peer_version, library.as_string())

        if library.LIBRARY_VERSION.is_compatible_with(peer_version):
            print_success(f"{peer_version} is compatible with {library.as_string()}")
            raise typer.Exit(0)

        print_failure(f"{peer_version} is not compatible with {library.as_string()}")
        raise typer.Exit(1)

    except NanoRpcError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
