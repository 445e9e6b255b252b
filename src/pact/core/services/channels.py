"""Channel resource: list, create and update the channels of a company.

API reference: https://pact-im.github.io/api-doc/#channels
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, ClassVar, Mapping, Sequence

from pact.core.domain.models import ChannelProvider, HttpMethod, SortDirection
from pact.core.services.base import AbstractService


def to_unix_timestamp(value: datetime | date | None) -> int | None:
    """Seconds since epoch; a plain `date` counts as midnight UTC."""

    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return int(value.timestamp())


class ChannelService(AbstractService):
    """Operations on `companies/{company_id}/channels`."""

    endpoint: ClassVar[str] = "companies/{}/channels"

    def validate_route_params(self, path_params: Sequence[int | str]) -> None:
        company_id = path_params[0]
        self.validator.check(company_id < 0, "Id of company must be greater or equal than 0")

    def get_channels(
        self,
        company_id: int,
        from_: str | None = None,
        per: int | None = None,
        sort: str | SortDirection | None = None,
    ) -> Any:
        """Return all the channels of the company, one page at a time.

        Args:
            company_id: Id of the company.
            from_: Next page token from the previous response. An invalid or
                empty token returns the first page.
            per: Number of elements per page (1..100). Server default: 50.
            sort: Sorting direction by id, ``asc`` or ``desc``. Server default: ``asc``.
        """
        self.validator.check(
            from_ is not None and len(from_) > 255,
            "Parameter 'from' must be length less or equal 255",
        )
        self.validator.between(per, 1, 100, name="Parameter 'per'")
        self.validator.sort(sort)

        query = {
            "from": from_,
            "per": per,
            "sort_direction": sort,
        }
        return self.request(HttpMethod.GET, self.endpoint, [company_id], query=query)

    def create_channel_unified(
        self,
        company_id: int,
        provider: str | ChannelProvider,
        parameters: Mapping[str, Any] | None = None,
    ) -> Any:
        """Create a channel of any provider.

        Only one channel per provider can be connected to a company; more
        need to be enabled by Pact support. Entries of `parameters` whose value
        is `None` are dropped, so they cannot be sent as an explicit null.
        """
        provider_value = provider.value if isinstance(provider, ChannelProvider) else provider
        self.validator.not_empty(provider_value, "Provider must not be empty string")

        body: dict[str, Any] = {"provider": provider_value}
        body.update(parameters or {})
        return self.request(HttpMethod.POST, self.endpoint, [company_id], body=body)

    def create_channel_by_token(
        self,
        company_id: int,
        provider: str | ChannelProvider,
        token: str,
    ) -> Any:
        """Create a channel authorized with a provider token (facebook, viber, vk, ...)."""
        self.validator.not_empty(token, "Token must not be empty string")
        return self.create_channel_unified(company_id, provider, {"token": token})

    def create_channel_whatsapp(
        self,
        company_id: int,
        sync_messages_from: datetime | date | None = None,
        do_not_mark_as_read: bool | None = None,
    ) -> Any:
        """Create a WhatsApp channel.

        Args:
            sync_messages_from: only messages created after it are synchronized.
            do_not_mark_as_read: keep chats unread after synchronization.
        """
        body = {
            "sync_messages_from": to_unix_timestamp(sync_messages_from),
            "do_not_mark_as_read": do_not_mark_as_read,
        }
        return self.create_channel_unified(company_id, ChannelProvider.WHATSAPP, body)

    def create_channel_instagram(
        self,
        company_id: int,
        login: str,
        password: str,
        sync_messages_from: datetime | date | None = None,
        sync_comments: bool | None = None,
    ) -> Any:
        self.validator.not_empty(login, "Login must not be empty string")
        self.validator.not_empty(password, "Password must not be empty string")
        body = {
            "login": login,
            "password": password,
            "sync_messages_from": to_unix_timestamp(sync_messages_from),
            "sync_comments": sync_comments,
        }
        return self.create_channel_unified(company_id, ChannelProvider.INSTAGRAM, body)

    def update_channel(
        self,
        company_id: int,
        conversation_id: int,
        parameters: Mapping[str, Any] | None = None,
    ) -> Any:
        """Update an existing channel of the company.

        Entries of `parameters` whose value is `None` are dropped, so a field
        cannot be reset to null through this call.
        """
        self.validator.check(
            conversation_id < 0,
            "Id of conversation must be greater or equal than 0",
        )
        return self.request(
            HttpMethod.PUT,
            self.endpoint + "/{}",
            [company_id, conversation_id],
            body=parameters,
        )

    def update_channel_instagram(
        self,
        company_id: int,
        conversation_id: int,
        login: str,
        password: str,
    ) -> Any:
        self.validator.not_empty(login, "Login must not be empty string")
        self.validator.not_empty(password, "Password must not be empty string")
        body = {
            "login": login,
            "password": password,
        }
        return self.update_channel(company_id, conversation_id, body)

    def update_channel_token(self, company_id: int, conversation_id: int, token: str) -> Any:
        """Update a channel authorized with a provider token."""
        self.validator.not_empty(token, "Token must not be empty string")
        return self.update_channel(company_id, conversation_id, {"token": token})
