"""Rich terminal summary — printed to stderr so the report on stdout stays clean."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from fsaudit.scanner.models import ScanSummary


def render_summary(summary: ScanSummary, console: Optional[Console] = None) -> None:
    """Print totals for a finished scan."""
    console = console or Console(stderr=True)

    console.print()
    table = Table(
        title="fsaudit Summary",
        title_style="bold",
        border_style="dim",
        show_header=False,
    )
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right", style="cyan")
    table.add_row("Roots scanned", str(len(summary.roots)))
    table.add_row("Entries visited", str(summary.visited))
    table.add_row("Entries reported", str(summary.reported))
    table.add_row("Entries skipped", str(summary.skipped))
    table.add_row("Duration", f"{summary.duration_ms:.0f}ms")
    console.print(table)
