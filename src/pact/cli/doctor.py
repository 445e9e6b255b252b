"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from pact.adapters.http_client import build_client
from pact.core.config import PactSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Configuration checks and token setup.")

_console = Console()


def _check_http(settings: PactSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get("")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the active configuration and check that the API is reachable."""

    settings = PactSettings()

    table = Table(title="Pact SDK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.api_token:
        table.add_row("API token", "OK", f"...{settings.api_token[-4:]}")
    else:
        table.add_row("API token", "MISSING", "Run `pact doctor setup-token` or set PACT_API_TOKEN")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "ABSENT", str(get_user_env_file()))

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup-token")
def setup_token() -> None:
    """Store the API token (and optionally the base URL) in the user config .env."""

    token = typer.prompt("Pact API token", hide_input=True).strip()
    if not token:
        raise typer.BadParameter("token is required")

    base_url = typer.prompt(
        "API base URL",
        default=PactSettings.model_fields["base_url"].default,
        show_default=True,
    ).strip()

    env_path = write_user_env_vars(
        {
            "PACT_API_TOKEN": token,
            "PACT_BASE_URL": base_url or None,
        }
    )

    _console.print(f"[green]Saved Pact config to:[/green] {env_path}")
