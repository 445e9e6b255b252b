"""httpx wrapper.

One place for base URL, timeouts, headers and the API token used by every
request to the Pact API.
"""

from __future__ import annotations

from typing import Any

import httpx

from pact.core.config import PactSettings
from pact.core.domain.models import ApiRequest
from pact.core.logging import get_logger

TOKEN_HEADER = "X-Private-Api-Token"

_log = get_logger("pact.http")


def build_client(
    settings: PactSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build an `httpx.Client` pointed at the Pact API.

    `transport` lets tests plug in an `httpx.MockTransport`.
    """

    settings = settings or PactSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.api_token:
        headers[TOKEN_HEADER] = settings.api_token
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class HttpTransport:
    """`RequestSender` backed by an `httpx.Client`."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def send(self, request: ApiRequest) -> Any:
        body = request.clean_body()
        response = self._client.request(
            request.method.value,
            request.path(),
            params=request.clean_query(),
            headers=request.headers or None,
            json=body or None,
        )
        _log.debug(
            "api_response",
            method=request.method.value,
            path=request.path(),
            status_code=response.status_code,
        )
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
