"""Console output for the CLI.

Provides a Console class that wraps rich for consistent, polished output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from pkgsearch.domain.catalog.service.catalog import CatalogStats
from pkgsearch.domain.search.model.value import SearchOutcome, SearchResult


class Console:
    """CLI output manager wrapping rich."""

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None).
            quiet: Suppress non-essential output.
        """
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    # -------------------------------------------------------------------------
    # Search results
    # -------------------------------------------------------------------------

    def search_results(self, outcome: SearchOutcome, *, show_scores: bool = False) -> None:
        """Print ranked results as a table."""
        if not outcome.results:
            query = outcome.filters.text_query or "filter-only search"
            self.warning(f'No packages found matching "{query}"')
            return

        if outcome.filters.has_filters:
            filters = []
            if outcome.filters.author is not None:
                filters.append(f"author:{outcome.filters.author}")
            if outcome.filters.label is not None:
                filters.append(f"label:{outcome.filters.label}")
            self.info(f"Filters: {' '.join(filters)}")
        if outcome.is_regex:
            self.info("Regex search")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", style="dim", width=3)
        table.add_column("Name", style="cyan")
        table.add_column("Author")
        table.add_column("Version")
        table.add_column("Description")
        if show_scores:
            table.add_column("Score", justify="right")

        for i, result in enumerate(outcome.results, 1):
            row = [
                str(i),
                result.name if result.kind == "package" else f"{result.name} [dim](library)[/dim]",
                ", ".join(result.authors) or "Unknown",
                result.latest_version or "",
                result.description,
            ]
            if show_scores:
                row.append(str(result.relevance_score))
            table.add_row(*row)

        self._console.print(table)

    def result_detail(self, result: SearchResult) -> None:
        """Print a single result in a panel."""
        lines = [result.description or "[dim]No description available[/dim]", ""]
        if result.latest_version:
            lines.append(f"[cyan]Latest Version:[/cyan] {result.latest_version}")
        if result.labels:
            lines.append(f"[cyan]Labels:[/cyan] {', '.join(result.labels)}")
        if result.homepage:
            lines.append(f"[cyan]Repository:[/cyan] {result.homepage}")
        if result.issues:
            lines.append(f"[cyan]Issues:[/cyan] {result.issues}")

        self._console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{result.name}[/bold] by {', '.join(result.authors) or 'Unknown'}",
                subtitle=f"[dim]{result.repository}[/dim]",
                border_style="blue",
                padding=(1, 2),
            )
        )

    def stats(self, stats: CatalogStats) -> None:
        self._console.print(f"[bold]Packages:[/bold] {stats.packages:,}")
        self._console.print(f"[bold]Libraries:[/bold] {stats.libraries:,}")

    def status(self, message: str):
        """Return a status context manager for long operations.

        Usage:
            with console.status("Loading..."):
                do_something()
        """
        return self._console.status(message)


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
