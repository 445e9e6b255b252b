"""Pact command line: manage company channels from the terminal."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable, Optional

import httpx
import typer
from rich.console import Console

from pact.cli import doctor
from pact.cli.ui_components import build_channels_table, extract_channels
from pact.client import PactClient
from pact.core.domain.models import SortDirection
from pact.core.errors import InvalidArgumentError
from pact.core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="Pact.im API client.")
channels_app = typer.Typer(no_args_is_help=True, help="List, create and update channels.")
app.add_typer(channels_app, name="channels")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def make_client() -> PactClient:
    return PactClient()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests at DEBUG level."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
) -> None:
    configure_logging(verbose=verbose, log_json=log_json)


def _call(operation: Callable[[PactClient], Any]) -> Any:
    """Run `operation` with a fresh client, mapping SDK errors to exit codes."""

    try:
        with make_client() as client:
            return operation(client)
    except InvalidArgumentError as exc:
        _err_console.print(f"[red]Invalid argument:[/red] {exc.message}")
        raise typer.Exit(code=2) from exc
    except httpx.HTTPStatusError as exc:
        _err_console.print(
            f"[red]API error:[/red] HTTP {exc.response.status_code} {exc.response.text.strip()}"
        )
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _err_console.print(f"[red]Request failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _print_json(payload: Any) -> None:
    if payload is None:
        _console.print("[dim]<empty response>[/dim]")
        return
    _console.print_json(data=payload)


def _parse_params(values: list[str]) -> dict[str, Any]:
    """`key=value` pairs; values are decoded as JSON when possible."""

    params: dict[str, Any] = {}
    for item in values:
        if "=" not in item:
            raise typer.BadParameter(f"expected key=value, got '{item}'", param_hint="--param")
        key, raw = item.split("=", 1)
        try:
            params[key.strip()] = json.loads(raw)
        except json.JSONDecodeError:
            params[key.strip()] = raw
    return params


@channels_app.command("list")
def list_channels(
    company_id: int = typer.Argument(..., help="Id of the company."),
    from_: Optional[str] = typer.Option(None, "--from", help="Next page token."),
    per: Optional[int] = typer.Option(None, "--per", help="Elements per page (1..100)."),
    sort: Optional[SortDirection] = typer.Option(None, "--sort", help="Sort direction by id."),
    raw: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
) -> None:
    """List the channels of a company."""

    payload = _call(lambda c: c.channels.get_channels(company_id, from_=from_, per=per, sort=sort))
    if raw:
        _print_json(payload)
        return

    channels, next_page = extract_channels(payload)
    _console.print(build_channels_table(channels, company_id=company_id))
    if next_page:
        _console.print(f"[dim]Next page:[/dim] --from {next_page}")


@channels_app.command("create")
def create_channel(
    company_id: int = typer.Argument(..., help="Id of the company."),
    provider: str = typer.Argument(..., help="Channel provider (whatsapp, viber, ...)."),
    param: list[str] = typer.Option([], "--param", "-p", help="Extra body field as key=value."),
) -> None:
    """Create a channel of any provider."""

    parameters = _parse_params(param)
    _print_json(_call(lambda c: c.channels.create_channel_unified(company_id, provider, parameters)))


@channels_app.command("create-token")
def create_channel_token(
    company_id: int = typer.Argument(...),
    provider: str = typer.Argument(...),
    token: str = typer.Option(..., "--token", prompt=True, hide_input=True),
) -> None:
    """Create a channel authorized with a provider token."""

    _print_json(_call(lambda c: c.channels.create_channel_by_token(company_id, provider, token)))


@channels_app.command("create-whatsapp")
def create_channel_whatsapp(
    company_id: int = typer.Argument(...),
    sync_messages_from: Optional[datetime] = typer.Option(None, "--sync-from"),
    do_not_mark_as_read: Optional[bool] = typer.Option(
        None, "--do-not-mark-as-read/--mark-as-read"
    ),
) -> None:
    """Create a WhatsApp channel."""

    _print_json(
        _call(
            lambda c: c.channels.create_channel_whatsapp(
                company_id, sync_messages_from, do_not_mark_as_read
            )
        )
    )


@channels_app.command("create-instagram")
def create_channel_instagram(
    company_id: int = typer.Argument(...),
    login: str = typer.Option(..., "--login"),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    sync_messages_from: Optional[datetime] = typer.Option(None, "--sync-from"),
    sync_comments: Optional[bool] = typer.Option(None, "--sync-comments/--no-sync-comments"),
) -> None:
    """Create an Instagram channel."""

    _print_json(
        _call(
            lambda c: c.channels.create_channel_instagram(
                company_id, login, password, sync_messages_from, sync_comments
            )
        )
    )


@channels_app.command("update")
def update_channel(
    company_id: int = typer.Argument(...),
    conversation_id: int = typer.Argument(...),
    param: list[str] = typer.Option([], "--param", "-p", help="Body field as key=value."),
) -> None:
    """Update an existing channel."""

    parameters = _parse_params(param)
    _print_json(_call(lambda c: c.channels.update_channel(company_id, conversation_id, parameters)))


@channels_app.command("update-token")
def update_channel_token(
    company_id: int = typer.Argument(...),
    conversation_id: int = typer.Argument(...),
    token: str = typer.Option(..., "--token", prompt=True, hide_input=True),
) -> None:
    """Replace the token of a token-based channel."""

    _print_json(
        _call(lambda c: c.channels.update_channel_token(company_id, conversation_id, token))
    )


@channels_app.command("update-instagram")
def update_channel_instagram(
    company_id: int = typer.Argument(...),
    conversation_id: int = typer.Argument(...),
    login: str = typer.Option(..., "--login"),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
) -> None:
    """Replace the credentials of an Instagram channel."""

    _print_json(
        _call(
            lambda c: c.channels.update_channel_instagram(
                company_id, conversation_id, login, password
            )
        )
    )


def run() -> None:
    app()
