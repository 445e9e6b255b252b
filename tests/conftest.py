"""Shared pytest fixtures for the Pact SDK tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from pact.adapters.http_client import HttpTransport, build_client
from pact.client import PactClient
from pact.core.config import PactSettings
from pact.core.domain.models import ApiRequest
from pact.core.services.channels import ChannelService


class RecordingTransport:
    """In-memory `RequestSender` that records every request it receives."""

    def __init__(self, response: Any = None) -> None:
        self.requests: list[ApiRequest] = []
        self.response = response if response is not None else {"status": "ok"}
        self.closed = False

    def send(self, request: ApiRequest) -> Any:
        self.requests.append(request)
        return self.response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> ApiRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def settings() -> PactSettings:
    """Settings isolated from env files on the test machine."""
    return PactSettings(_env_file=None, api_token="secret-token", base_url="https://api.test/p1/")


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def channels(recorder: RecordingTransport) -> ChannelService:
    return ChannelService(recorder)


@pytest.fixture
def captured_http() -> list[httpx.Request]:
    return []


@pytest.fixture
def http_client_factory(
    settings: PactSettings, captured_http: list[httpx.Request]
) -> Generator[Callable[..., PactClient]]:
    """Build `PactClient`s backed by `httpx.MockTransport`.

    The handler records the outgoing request and answers with ``status_code``/``payload``.
    """
    clients: list[PactClient] = []

    def factory(status_code: int = 200, payload: Any = None) -> PactClient:
        def handler(request: httpx.Request) -> httpx.Response:
            captured_http.append(request)
            if payload is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=payload)

        http = build_client(settings, transport=httpx.MockTransport(handler))
        client = PactClient(settings, transport=HttpTransport(http))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content.decode("utf-8"))
