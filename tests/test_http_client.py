"""Tests for the httpx transport and the PactClient facade."""

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from pact.adapters.http_client import TOKEN_HEADER, build_client
from pact.client import PactClient
from pact.core.config import PactSettings
from pact.core.errors import InvalidArgumentError
from tests.conftest import RecordingTransport, request_json


class TestBuildClient:
    def test_defaults(self, settings: PactSettings) -> None:
        with build_client(settings) as client:
            assert str(client.base_url) == "https://api.test/p1/"
            assert client.headers[TOKEN_HEADER] == "secret-token"
            assert client.headers["Accept"] == "application/json"
            assert client.headers["User-Agent"] == settings.user_agent

    def test_no_token_header_without_token(self) -> None:
        settings = PactSettings(_env_file=None, api_token=None)
        with build_client(settings) as client:
            assert TOKEN_HEADER not in client.headers

    def test_extra_headers(self, settings: PactSettings) -> None:
        with build_client(settings, extra_headers={"X-Trace": "1"}) as client:
            assert client.headers["X-Trace"] == "1"


class TestHttpTransport:
    def test_get_channels_on_the_wire(self, http_client_factory, captured_http) -> None:
        payload = {"status": "ok", "data": {"channels": [{"external_id": 1, "provider": "whatsapp"}]}}
        client = http_client_factory(payload=payload)

        result = client.channels.get_channels(42, per=20, sort="asc")

        assert result == payload
        (request,) = captured_http
        assert request.method == "GET"
        assert request.url.path == "/p1/companies/42/channels"
        assert dict(request.url.params) == {"per": "20", "sort_direction": "asc"}
        assert request.headers[TOKEN_HEADER] == "secret-token"
        assert request.content == b""

    def test_post_sends_json_body(self, http_client_factory, captured_http) -> None:
        client = http_client_factory(payload={"status": "ok"})

        client.channels.create_channel_whatsapp(
            1, datetime(2024, 1, 15, 12, 30, tzinfo=timezone.utc), True
        )

        (request,) = captured_http
        assert request.method == "POST"
        assert request.url.path == "/p1/companies/1/channels"
        assert request_json(request) == {
            "provider": "whatsapp",
            "sync_messages_from": 1705321800,
            "do_not_mark_as_read": True,
        }

    def test_put_update(self, http_client_factory, captured_http) -> None:
        client = http_client_factory(payload={"status": "ok"})

        client.channels.update_channel_token(3, 8, "tok")

        (request,) = captured_http
        assert request.method == "PUT"
        assert request.url.path == "/p1/companies/3/channels/8"
        assert request_json(request) == {"token": "tok"}

    def test_empty_response_returns_none(self, http_client_factory) -> None:
        client = http_client_factory(status_code=204)
        assert client.channels.update_channel(3, 8, {"a": 1}) is None

    def test_http_error_propagates(self, http_client_factory) -> None:
        client = http_client_factory(status_code=422, payload={"status": "error"})
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            client.channels.get_channels(1)
        assert exc_info.value.response.status_code == 422

    def test_invalid_argument_issues_no_http_call(self, http_client_factory, captured_http) -> None:
        client = http_client_factory(payload={"status": "ok"})
        with pytest.raises(InvalidArgumentError):
            client.channels.get_channels(-3)
        assert captured_http == []


class TestPactClient:
    def test_token_overrides_settings(self, settings: PactSettings) -> None:
        client = PactClient(settings, token="other", transport=RecordingTransport())
        assert client.settings.api_token == "other"
        assert settings.api_token == "secret-token"

    def test_context_manager_closes_transport(self, settings: PactSettings) -> None:
        transport = RecordingTransport()
        with PactClient(settings, transport=transport) as client:
            client.channels.get_channels(1)
        assert transport.closed is True
        assert len(transport.requests) == 1
