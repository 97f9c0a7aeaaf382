"""fsaudit CLI — Typer application that scans every drive root and prints the report."""

from __future__ import annotations

import sys

import typer
from rich.console import Console

from fsaudit import __version__

app = typer.Typer(
    name="fsaudit",
    help="Report interesting files and directories on every drive.",
    add_completion=False,
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"fsaudit {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Diagnostics and a summary on stderr",
    ),
) -> None:
    """Scan every drive root and print one ``<path> # <label>`` line per interesting entry."""
    from fsaudit.config.identity import IdentityError
    from fsaudit.config.loader import resolve_platform
    from fsaudit.log import configure_logging
    from fsaudit.output import terminal
    from fsaudit.scanner.engine import scan_drives

    configure_logging(verbose)

    # --- Resolve platform (fatal on failure, before any output) ---
    try:
        platform = resolve_platform()
    except IdentityError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Roots: {', '.join(platform.drive_roots())}[/dim]")

    # --- Scan ---
    summary = scan_drives(platform, stream=sys.stdout)

    if verbose:
        terminal.render_summary(summary, console)

    raise typer.Exit(code=0)
