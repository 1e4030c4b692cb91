"""Cache management commands."""

from pathlib import Path
from typing import Optional

import typer

from ..cache import ChangeCache
from . import app
from ._common import console, resolve_config


def _open_cache(config: Optional[Path]) -> ChangeCache:
    settings = resolve_config(config=config)
    return ChangeCache(settings.cache_dir, enabled=settings.cache_enabled)


@app.command()
def cache_info(
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Configuration file (TOML)", exists=True, dir_okay=False
    ),
):
    """Show change cache information and statistics."""
    cache = _open_cache(config)
    with cache:
        stats = cache.stats()

    console.print("[bold cyan]Arch Insight Cache Info[/bold cyan]")
    console.print()

    if stats.get("enabled"):
        console.print("Status: [green]Enabled[/green]")
        console.print(f"Directory: [blue]{stats.get('directory', 'N/A')}[/blue]")
        console.print(f"Tracked files: [yellow]{stats.get('files', 0)}[/yellow]")
        console.print(f"Extraction entries: [yellow]{stats.get('syntax_entries', 0)}[/yellow]")
        console.print(f"Size: [yellow]{stats.get('volume', 0)} bytes[/yellow]")
    else:
        console.print("Status: [red]Disabled[/red]")


@app.command()
def cache_clear(
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Configuration file (TOML)", exists=True, dir_okay=False
    ),
):
    """Clear the change cache."""
    cache = _open_cache(config)

    if not cache.enabled:
        console.print("[yellow]Cache is disabled[/yellow]")
        raise typer.Exit(0)

    with cache:
        cache.clear()
    console.print("[green]Cache cleared successfully[/green]")
