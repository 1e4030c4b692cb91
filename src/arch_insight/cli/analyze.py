"""Main analysis command."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.table import Table

from ..cache import ChangeCache
from ..engine import AnalysisEngine
from ..exceptions import ArchInsightError
from ..logging_config import setup_logging, verbosity_for
from ..scoring.models import AnalysisResult
from ..serialization import result_to_json
from . import app
from ._common import LEVEL_COLORS, SEVERITY_COLORS, console, describe_finding, resolve_config

MAX_FINDINGS_SHOWN = 10


@app.command()
def analyze(
    path: Path = typer.Argument(
        Path("."),
        help="Root directory of the C# source tree",
    ),
    output_format: str = typer.Option(
        "rich",
        "-f",
        "--format",
        help="Output format: rich | json",
        click_type=click.Choice(["rich", "json"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel file readers (default: auto-detect)",
        min=1,
        max=32,
    ),
    incremental: bool = typer.Option(
        False,
        "--incremental",
        help="Use the on-disk change cache and report changed files",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging and every finding",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
):
    """
    Score a source tree on the four architecture dimensions.

    [bold cyan]Examples:[/bold cyan]

      arch-insight analyze ./src

      arch-insight analyze ./src --format json

      arch-insight analyze ./src --incremental --verbose
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(config=config, workers=workers, verbose=verbose, quiet=quiet)
        if settings.verbosity != verbosity_for(verbose, quiet):
            logger = setup_logging(verbosity=settings.verbosity)

        change_cache = None
        if incremental:
            change_cache = ChangeCache(settings.cache_dir, enabled=settings.cache_enabled)

        try:
            result = AnalysisEngine(config=settings, change_cache=change_cache).run(path)
        finally:
            if change_cache is not None:
                change_cache.close()

        if output_format.lower() == "json":
            print(result_to_json(result))
        else:
            _output_rich(result, verbose=verbose, incremental=incremental)

    except ArchInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


def _output_rich(result: AnalysisResult, verbose: bool = False, incremental: bool = False):
    """Scorecard table plus the most severe findings."""
    console.print()
    console.print(
        f"[bold cyan]ARCH INSIGHT[/bold cyan] - [bold]{result.total_files}[/bold] files, "
        f"[bold]{result.graph.node_count}[/bold] graph nodes, "
        f"[bold]{result.graph.edge_count}[/bold] edges"
    )
    console.print()

    table = Table(title="Architecture scorecard", show_lines=False)
    table.add_column("Dimension", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Level")
    table.add_column("Details")
    for dimension in result.dimensions:
        color = LEVEL_COLORS[dimension.level]
        if dimension.failed:
            details = f"[red]failed: {dimension.error}[/red]"
        else:
            details = ", ".join(f"{k}={v}" for k, v in dimension.counts.items() if v)
        table.add_row(
            dimension.dimension.value,
            f"{dimension.score}/5",
            f"[{color}]{dimension.level.value}[/{color}]",
            details or "-",
        )
    composite = result.composite
    color = LEVEL_COLORS[composite.level]
    table.add_row(
        "[bold]composite[/bold]",
        f"[bold]{composite.display}[/bold]",
        f"[{color}]{composite.level.value}[/{color}]",
        "",
    )
    console.print(table)
    console.print()

    findings = result.all_findings()
    if not findings:
        console.print("[bold green]No architecture findings.[/bold green]")
    else:
        shown = findings if verbose else findings[:MAX_FINDINGS_SHOWN]
        for finding in shown:
            sev_color = SEVERITY_COLORS[finding.severity]
            console.print(
                f"  [{sev_color}]{finding.severity.value:<8}[/{sev_color}] "
                f"[dim]{finding.kind.value:<11}[/dim] {finding.file}"
            )
            console.print(f"    {describe_finding(finding)}")
        remaining = len(findings) - len(shown)
        if remaining > 0:
            console.print(f"  [dim]... and {remaining} more (use --verbose to list all)[/dim]")

    if result.diagnostics:
        console.print()
        console.print(f"[yellow]{len(result.diagnostics)} file(s) or stage(s) skipped[/yellow]")
        if verbose:
            for diagnostic in result.diagnostics:
                console.print(f"  [dim]{diagnostic.path}: {diagnostic.reason}[/dim]")

    if incremental:
        console.print(f"[dim]{len(result.changed_files)} file(s) changed since the last scan[/dim]")
    console.print()
