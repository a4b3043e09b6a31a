"""
Rendering functions for relfinder output.

This module handles all pretty-printing and table formatting.
Providers return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import Iterable, Optional

from .results import Result

console = Console()


def format_published(result: Result) -> str:
    """Format a publish time for display, '-' when unknown."""
    if not result.has_published:
        return '-'
    return result.published.strftime('%Y-%m-%d %H:%M:%S %z').strip()


def render_results_table(results: Iterable[Result], title: Optional[str] = None) -> None:
    """
    Render releases as a pretty table.

    Args:
        results: Results in display order
        title: Optional table title
    """
    results = list(results)
    if not results:
        console.print("[yellow]No releases found.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    table.add_column("Version", style="cyan")
    table.add_column("Published")
    table.add_column("Location", overflow="fold")

    for result in results:
        table.add_row(result.version, format_published(result), result.location)

    console.print(table)
