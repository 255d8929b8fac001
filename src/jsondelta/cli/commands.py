from __future__ import annotations

from pathlib import Path

import typer

from jsondelta.config import load_settings
from jsondelta.constants import EXIT_INTERNAL_ERROR
from jsondelta.engine import CommandOutcome, compare_files
from jsondelta.errors import ConfigError


def _version_callback(value: bool) -> None:
    if value:
        from jsondelta import __version__

        typer.echo(f"jsondelta {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Compare two JSON documents and report every difference")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


def _emit_outcome(outcome: CommandOutcome) -> None:
    if outcome.text is not None:
        typer.echo(outcome.text)

    for error in outcome.errors:
        typer.echo(f"ERROR: {error.message}", err=True)

    comparison = outcome.comparison
    if comparison is not None and not outcome.errors:
        count = comparison.result.summary["change_count"]
        typer.echo("No differences found" if comparison.identical else f"{count} change(s) found")
    for path in outcome.written:
        typer.echo(f"Diff written to {path}")

    raise typer.Exit(outcome.exit_code)


@app.command()
def compare(
    left: Path = typer.Argument(..., help="Original JSON file"),
    right: Path = typer.Argument(..., help="Modified JSON file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output HTML file"),
    json_output: Path | None = typer.Option(None, "--json-output", help="Also write a JSON change report"),
    markdown_output: Path | None = typer.Option(None, "--markdown-output", help="Also write a Markdown report"),
    title: str | None = typer.Option(None, "--title", help="Report title"),
    output_format: str | None = typer.Option(
        None, "--format", help="Console output: html (report file only) | text (also print annotated trees)"
    ),
    exit_code: bool | None = typer.Option(
        None, "--exit-code/--no-exit-code", help="Exit with status 1 when the documents differ"
    ),
    config: Path | None = typer.Option(None, "--config", help="YAML config file"),
) -> None:
    """Diff LEFT against RIGHT and write an annotated HTML report."""
    try:
        settings = load_settings(config).with_overrides(
            output=output,
            json_output=json_output,
            markdown_output=markdown_output,
            title=title,
            format=output_format,
            exit_code=exit_code,
        )
    except ConfigError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    _emit_outcome(compare_files(left, right, settings))
