"""Main analysis command."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..analyzer import SpaceAnalyzer
from ..exceptions import CyclospaceError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config
from ._display import print_report


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(
        ...,
        help="Files or directories to analyze",
        exists=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json",
    ),
    spaces: bool = typer.Option(
        False,
        "--spaces",
        "-s",
        help="Show the nested space tree of every file",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Only analyze files of this language (python, rust, java, ...)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers",
        min=1,
        max=32,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Compute cyclomatic complexity per file and per nested space.

    [bold cyan]Examples:[/bold cyan]

      cyclospace analyze src/

      cyclospace analyze main.rs lib.rs --spaces

      cyclospace analyze . --format json > complexity.json
    """
    if fmt not in ("rich", "json"):
        console.print(f"[red]Error:[/red] unknown format '{fmt}' (use rich or json)")
        raise typer.Exit(2)

    try:
        settings = resolve_config(
            config=config, workers=workers, language=language, verbose=verbose, quiet=quiet
        )
    except CyclospaceError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    # Flags, env vars and config files all land in settings.verbosity
    logger = setup_logging(
        verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet"
    )

    try:
        report = SpaceAnalyzer(settings).analyze_paths(paths)
    except CyclospaceError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    if fmt == "json":
        typer.echo(json.dumps(report.to_dict(include_spaces=spaces), indent=2))
    else:
        print_report(report, show_spaces=spaces)

    if not report.files:
        if fmt != "json":
            console.print("[yellow]No files analyzed[/yellow]")
        raise typer.Exit(1)
