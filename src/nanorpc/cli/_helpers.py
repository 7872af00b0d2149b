"""Output helpers for the CLI."""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"[green]✓[/green] {message}")


def print_failure(message: str) -> None:
    """Print a negative, non-error result line."""
    console.print(f"[red]✗[/red] {message}")


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    err_console.print(f"[red]✗ Error:[/red] {message}")
