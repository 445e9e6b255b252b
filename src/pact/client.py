"""Entry point of the SDK: one client, one attribute per API resource."""

from __future__ import annotations

from pact.adapters.http_client import HttpTransport, build_client
from pact.core.config import PactSettings
from pact.core.interfaces.transport import RequestSender
from pact.core.services.channels import ChannelService


class PactClient:
    """Root client that holds the transport and exposes the resource services.

    Usage::

        with PactClient(token="...") as pact:
            pact.channels.get_channels(company_id=42, per=20)
    """

    def __init__(
        self,
        settings: PactSettings | None = None,
        *,
        token: str | None = None,
        transport: RequestSender | None = None,
    ) -> None:
        settings = settings or PactSettings()
        if token is not None:
            settings = settings.model_copy(update={"api_token": token})
        self.settings = settings
        self._transport = transport or HttpTransport(build_client(settings))
        self.channels = ChannelService(self._transport)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "PactClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
