"""CLI entry point (Typer).

Invoked without a subcommand it runs the whole pipeline:
fetch -> join -> write JSON -> read it back -> print the summary.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_aggregate_json, load_aggregate_json
from cli import doctor
from cli.ui_components import build_dangling_panel, build_fetch_errors_table
from core.config import AppSettings
from core.domain.models import DataSummary
from core.errors import FetchAllError, PersistenceError
from core.logging import setup_logging
from core.services.aggregator import aggregate_data, find_dangling_references
from core.services.fetch_pipeline import fetch_all_data
from core.services.report import format_summary, summarize

logger = logging.getLogger(__name__)

app = typer.Typer(help="Fetch users, posts and comments, join them and summarize the result.")
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)

EXIT_FETCH_FAILED = 1
EXIT_PERSISTENCE_FAILED = 2
EXIT_INVALID_SETTINGS = 3


def run_pipeline(settings: AppSettings) -> DataSummary:
    """Execute every stage sequentially, except the fetch fan-out itself."""

    users, posts, comments = asyncio.run(fetch_all_data(settings=settings))

    aggregated = aggregate_data(users, posts, comments)
    dangling = find_dangling_references(users, posts, comments)
    if not dangling.is_empty:
        logger.warning(
            "%d post(s) and %d comment(s) reference a missing parent and were left out",
            len(dangling.orphan_posts),
            len(dangling.orphan_comments),
        )
        _err_console.print(build_dangling_panel(dangling))

    output_path = export_aggregate_json(aggregate=aggregated, output_path=settings.output_path)
    return summarize(load_aggregate_json(output_path))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Override the JSON output file.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override the log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
) -> None:
    overrides: dict[str, object] = {}
    if output is not None:
        overrides["output_path"] = output
    if log_level:
        overrides["log_level"] = log_level
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            _err_console.print(f"[red]Invalid setting[/red] {escape(field)}: {escape(error['msg'])}")
        raise typer.Exit(code=EXIT_INVALID_SETTINGS) from exc

    setup_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is not None:
        return

    try:
        summary = run_pipeline(settings)
    except FetchAllError as exc:
        _err_console.print(build_fetch_errors_table(exc))
        raise typer.Exit(code=EXIT_FETCH_FAILED) from exc
    except PersistenceError as exc:
        _err_console.print(f"[red]Failed to process the file:[/red] {exc}")
        raise typer.Exit(code=EXIT_PERSISTENCE_FAILED) from exc

    typer.echo(format_summary(summary, settings.output_path))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
