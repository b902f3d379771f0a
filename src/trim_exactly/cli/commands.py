from __future__ import annotations

from pathlib import Path

import typer

from trim_exactly.constants import (
    EXIT_INTERNAL_ERROR,
    EXIT_MISMATCH,
    EXIT_SUCCESS,
    PATTERN_KIND_AUTO,
    SIDE_LEFT,
    SIDE_RIGHT,
)
from trim_exactly.jobs import load_jobs, run_jobs
from trim_exactly.patterns import as_pattern
from trim_exactly.report import render_json, render_text
from trim_exactly.trim import TrimErr, trim


def _version_callback(value: bool) -> None:
    if value:
        from trim_exactly import __version__

        typer.echo(f"trim-exactly {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Trim a pattern only when it repeats an exact number of times")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


def _trim_one(side: str, text: str, pattern: str, count: int, kind: str, as_json: bool) -> None:
    try:
        result = trim(text, as_pattern(pattern, kind), count, side)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    if as_json:
        typer.echo(render_json([(side, result)]))
    else:
        typer.echo(result.text)
    if isinstance(result, TrimErr):
        typer.echo(f"MISMATCH: {result.error.message}", err=True)
        raise typer.Exit(EXIT_MISMATCH)
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def left(
    text: str = typer.Argument(..., help="Text to trim"),
    pattern: str = typer.Argument(..., help="Character or substring to remove"),
    count: int = typer.Argument(..., min=0, help="Exact number of occurrences required"),
    kind: str = typer.Option(PATTERN_KIND_AUTO, "--kind", help="Pattern kind: auto | char | substring"),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON"),
) -> None:
    """Trim PATTERN from the start of TEXT exactly COUNT times."""
    _trim_one(SIDE_LEFT, text, pattern, count, kind, as_json)


@app.command()
def right(
    text: str = typer.Argument(..., help="Text to trim"),
    pattern: str = typer.Argument(..., help="Character or substring to remove"),
    count: int = typer.Argument(..., min=0, help="Exact number of occurrences required"),
    kind: str = typer.Option(PATTERN_KIND_AUTO, "--kind", help="Pattern kind: auto | char | substring"),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON"),
) -> None:
    """Trim PATTERN from the end of TEXT exactly COUNT times."""
    _trim_one(SIDE_RIGHT, text, pattern, count, kind, as_json)


@app.command()
def run(
    jobs_file: Path = typer.Argument(..., help="YAML file listing trim jobs"),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON"),
) -> None:
    """Run every trim job in a YAML jobs file."""
    try:
        jobs = load_jobs(jobs_file)
        outcome = run_jobs(jobs)
    except (OSError, TypeError, ValueError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    if as_json:
        typer.echo(render_json(outcome.results))
    else:
        typer.echo(render_text(outcome.results))
    for name in outcome.mismatches:
        typer.echo(f"MISMATCH: {name}", err=True)
    raise typer.Exit(outcome.exit_code)
