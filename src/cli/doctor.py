"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import build_settings_table
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_endpoints(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[tuple[str, bool, str]]:
    endpoints = {
        "users": settings.users_url,
        "posts": settings.posts_url,
        "comments": settings.comments_url,
    }

    async with build_async_client(settings, transport=transport) as client:

        async def probe(name: str, url: str) -> tuple[str, bool, str]:
            try:
                response = await client.get(url)
            except httpx.HTTPError as exc:
                return name, False, str(exc) or exc.__class__.__name__
            return name, response.is_success, f"HTTP {response.status_code}"

        return list(await asyncio.gather(*(probe(n, u) for n, u in endpoints.items())))


def _check_output_dir(output_path: Path) -> tuple[bool, str]:
    directory = output_path.resolve().parent
    while not directory.exists() and directory != directory.parent:
        directory = directory.parent
    if os.access(directory, os.W_OK):
        return True, str(directory)
    return False, f"{directory} is not writable"


@app.command()
def run(ctx: typer.Context) -> None:
    """Probe the configured endpoints and the output location."""

    root = ctx.find_root()
    settings = root.obj if isinstance(root.obj, AppSettings) else AppSettings()

    _console.print(build_settings_table(settings))

    table = Table(title="placeholder-join doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    all_ok = True
    for name, ok, detail in asyncio.run(_check_endpoints(settings)):
        all_ok = all_ok and ok
        table.add_row(f"GET {name}", "OK" if ok else "FAIL", detail)

    ok_dir, detail_dir = _check_output_dir(settings.output_path)
    all_ok = all_ok and ok_dir
    table.add_row("Output directory", "OK" if ok_dir else "FAIL", detail_dir)

    _console.print(table)

    if not all_ok:
        raise typer.Exit(code=1)
