"""Analyze command: one repository, one report."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..api import analyze_repository
from ..core import ProgressReporter, SilentReporter
from ..exceptions import ProvenanceError
from ..formatters import FORMATTERS, get_formatter
from ..logging_config import setup_logging
from ..models import RepositoryReport
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def analyze(
    target: str = typer.Argument(
        ...,
        help="Local repository path or clone URL",
    ),
    branch: Optional[str] = typer.Option(
        None,
        "-b",
        "--branch",
        help="Branch to clone (remote targets only)",
    ),
    output_format: str = typer.Option(
        "rich",
        "-f",
        "--format",
        help="Output format: rich | json | html | all",
        click_type=click.Choice(["rich", "json", "html", "all"], case_sensitive=False),
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Write the report to a file (a directory for --format all)",
        writable=True,
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
        help="Threads used to scan the working tree",
        min=1,
        max=32,
    ),
    max_commits: Optional[int] = typer.Option(
        None,
        "--max-commits",
        help="Read at most this many commits (0 = all)",
        min=0,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors and hide the progress bar",
    ),
):
    """
    Analyze a repository for signs of AI-assisted development.

    Reads the commit history, scans the working tree and reports nine
    indicators alongside basic repository statistics.

    [bold cyan]Examples:[/bold cyan]

      git-provenance analyze .

      git-provenance analyze https://github.com/user/repo.git --branch main

      git-provenance analyze ../project --format json --output report.json

      git-provenance analyze . --format all --output reports/
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            workers=workers,
            max_commits=max_commits,
            verbose=verbose,
            quiet=quiet,
        )

        output_format = output_format.lower()
        formats = list(FORMATTERS) if output_format == "all" else [output_format]

        silent = quiet or "rich" not in formats
        reporter = SilentReporter() if silent else ProgressReporter(err_console)
        report = reporter.run(
            lambda on_progress: analyze_repository(
                target, branch=branch, config=settings, on_progress=on_progress
            )
        )

        if output is None:
            for i, name in enumerate(formats):
                if i:
                    console.rule()
                get_formatter(name).render(report)
        elif len(formats) > 1 or output.is_dir():
            _write_to_directory(report, formats, output, quiet)
        else:
            output.write_text(get_formatter(formats[0]).format(report), encoding="utf-8")
            if not quiet:
                console.print(f"Report written to [green]{escape(str(output))}[/green]")

    except ProvenanceError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


def _write_to_directory(
    report: RepositoryReport, formats: list[str], directory: Path, quiet: bool
) -> None:
    """Write one timestamped file per format into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    for name in formats:
        formatter = get_formatter(name)
        path = directory / f"git-provenance-{stamp}.{formatter.extension}"
        path.write_text(formatter.format(report), encoding="utf-8")
        if not quiet:
            console.print(f"{name.upper()} saved to [green]{escape(str(path))}[/green]")
