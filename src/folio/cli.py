"""Typer-based CLI for folio."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from folio.config.settings import FolioSettings
from folio.exceptions import FolioError
from folio.logging_setup import configure_logging
from folio.site import Site

app = typer.Typer(name="folio", help="Build static sites out of content resources.", no_args_is_help=True)
console = Console()
logger = logging.getLogger(__name__)


def _load_site(site_root: Path) -> Site:
    settings = FolioSettings.load(site_root.resolve())
    return Site(settings)


@app.callback()
def main(
    log_level: str = typer.Option("", "--log-level", help="Logging level (defaults to $FOLIO_LOG_LEVEL or INFO)."),
) -> None:
    configure_logging(log_level or None)


@app.command()
def build(site_root: Path = typer.Argument(Path("."), help="Root directory of the site.")) -> None:
    """
    Read, render and write every resource of the site.
    """
    try:
        site = _load_site(site_root)
        written = site.process()
    except FolioError as exc:
        console.print(f"[bold red]Build failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold green]Wrote {written} files[/] to {site.destination}")


@app.command("list")
def list_resources(site_root: Path = typer.Argument(Path("."), help="Root directory of the site.")) -> None:
    """
    List resources in site order.
    """
    try:
        site = _load_site(site_root)
        site.read()
    except FolioError as exc:
        console.print(f"[bold red]Read failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title="Resources")
    table.add_column("Date")
    table.add_column("Collection")
    table.add_column("Path")
    table.add_column("URL")
    for resource in site.resources:
        table.add_row(
            resource.date.strftime("%Y-%m-%d"),
            resource.collection.label,
            resource.relative_path.as_posix(),
            resource.relative_url or "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
