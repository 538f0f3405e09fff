"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="zendesk-tickets Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `zendesk-tickets doctor setup` to point the CLI at your API base URL."
        )


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()
    base_url = typer.prompt("API base URL", default=current.base_url, show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=str(current.http_timeout_seconds),
        show_default=True,
    ).strip()

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "ZENDESK_BASE_URL": base_url.rstrip("/"),
            "ZENDESK_HTTP_TIMEOUT_SECONDS": timeout,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
