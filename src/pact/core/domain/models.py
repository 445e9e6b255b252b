"""Domain models (Pydantic v2).

They describe *what* is sent to the Pact API, not *how* it travels. API
responses are returned as decoded JSON and have no models here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from pact.core.errors import InvalidArgumentError


class HttpMethod(str, Enum):
    """HTTP methods used by the API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class SortDirection(str, Enum):
    """Sorting direction (by id) accepted by list endpoints."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(item.value for item in cls)


class ChannelProvider(str, Enum):
    """Known channel providers.

    The API accepts other values too; methods take a plain `str` and this
    enum is a convenience.
    """

    WHATSAPP = "whatsapp"
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    VIBER = "viber"
    VK = "vk"
    TELEGRAM = "telegram"
    TELEGRAM_PERSONAL = "telegram_personal"
    AVITO = "avito"


class ApiRequest(BaseModel):
    """Description of one API request.

    `endpoint` is a template whose `{}` slots are filled, in order, with
    `path_params`.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(
        ...,
        description="HTTP method.",
    )
    endpoint: str = Field(
        ...,
        min_length=1,
        description="Endpoint template relative to the base URL (e.g. 'companies/{}/channels').",
    )
    path_params: list[int | str] = Field(
        default_factory=list,
        description="Path parameters, in template slot order.",
    )
    query: dict[str, Any] = Field(
        default_factory=dict,
        description="Query string parameters.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra request headers.",
    )
    body: dict[str, Any] = Field(
        default_factory=dict,
        description="JSON request body.",
    )

    def path(self) -> str:
        """Render the template with URL-quoted path parameters."""

        slots = self.endpoint.count("{}")
        if slots != len(self.path_params):
            raise InvalidArgumentError(
                f"Endpoint '{self.endpoint}' expects {slots} path parameters, got {len(self.path_params)}"
            )
        return self.endpoint.format(*(quote(str(p), safe="") for p in self.path_params))

    def clean_query(self) -> dict[str, Any]:
        return {k: _wire_value(v) for k, v in self.query.items() if v is not None}

    def clean_body(self) -> dict[str, Any]:
        """Body without `None` values; the API never receives an explicit null."""

        return {k: _wire_value(v) for k, v in self.body.items() if v is not None}


def _wire_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value
