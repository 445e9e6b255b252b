"""Rich building blocks for the CLI output."""

from __future__ import annotations

from typing import Any

from rich.table import Table


def extract_channels(payload: Any) -> tuple[list[dict[str, Any]], str | None]:
    """Pull the channel list and the next page token out of a list response.

    Expected shape: ``{"status": "ok", "data": {"channels": [...], "next_page": "..."}}``.
    """

    if not isinstance(payload, dict):
        return [], None
    data = payload.get("data")
    if not isinstance(data, dict):
        return [], None
    channels = [c for c in data.get("channels") or [] if isinstance(c, dict)]
    next_page = data.get("next_page")
    return channels, next_page if isinstance(next_page, str) and next_page else None


def build_channels_table(channels: list[dict[str, Any]], *, company_id: int) -> Table:
    table = Table(title=f"Channels of company {company_id}")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Provider", style="white")
    for channel in channels:
        table.add_row(
            str(channel.get("external_id", channel.get("id", "-"))),
            str(channel.get("provider", "-")),
        )
    return table
