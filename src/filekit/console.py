"""Console output for the command line interface."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from filekit.models import FileInfo


class Reporter:
    """Formats results and messages on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the reporter.

        Args:
            console: Console to print to. Defaults to a new Console.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_entries(self, entries: list[str]) -> None:
        """Display directory entries, one per line in sorted order.

        Args:
            entries: Entry names.
        """
        if not entries:
            self.console.print("[yellow]Directory is empty[/yellow]")
            return
        for entry in sorted(entries):
            self.console.print(entry, markup=False, highlight=False)

    def show_file_info(self, info: FileInfo) -> None:
        """Display a FileInfo table.

        Args:
            info: Snapshot to display.
        """
        table = Table(title=info.path, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("URL", info.url)
        table.add_row("Name", info.name)
        table.add_row("Parent", info.parent_path)
        table.add_row("Parent name", info.parent_name or "-")
        table.add_row("Exists", "yes" if info.exists else "no")
        table.add_row("Directory", "yes" if info.is_directory else "no")

        self.console.print(table)
