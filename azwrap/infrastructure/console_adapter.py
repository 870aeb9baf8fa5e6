"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class ConsoleAdapter:
    """Adapter for console operations using Rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console()

    def print(self, message: str, style: str | None = None) -> None:
        """Print a message to the console."""
        if style:
            self._console.print(f"[{style}]{message}[/{style}]")
        else:
            self._console.print(message)

    def print_error(self, message: str) -> None:
        """Print an error message to the console."""
        self._console.print(f"[red bold]Error:[/red bold] {escape(message)}", highlight=False)

    def print_success(self, message: str) -> None:
        """Print a success message to the console."""
        self._console.print(f"[green]✓[/green] {message}")

    def print_output(self, text: str) -> None:
        """Print captured command output verbatim."""
        self._console.print(text, markup=False, highlight=False, soft_wrap=True, end="")
