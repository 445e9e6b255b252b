"""Base class for the per-resource API services.

Each service validates its arguments, builds query/body mappings and
delegates to `request`, which wraps them in an `ApiRequest` for the transport.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Mapping, Sequence

from pact.core.domain.models import ApiRequest, HttpMethod
from pact.core.interfaces.transport import RequestSender
from pact.core.logging import get_logger
from pact.core.validation import Validator


class AbstractService:
    """Service bound to one API resource (`endpoint`)."""

    endpoint: ClassVar[str] = ""

    def __init__(self, transport: RequestSender, validator: Validator | None = None) -> None:
        self._transport = transport
        self.validator = validator or Validator()
        self._log = get_logger(f"pact.services.{type(self).__name__}")

    def validate_route_params(self, path_params: Sequence[int | str]) -> None:
        """Hook for route parameter checks; accepts everything by default."""

    def request(
        self,
        method: HttpMethod,
        endpoint: str,
        path_params: Sequence[int | str],
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        self.validate_route_params(path_params)

        api_request = ApiRequest(
            method=method,
            endpoint=endpoint,
            path_params=list(path_params),
            query=dict(query or {}),
            headers=dict(headers or {}),
            body=dict(body or {}),
        )
        if self._log.isEnabledFor(logging.DEBUG):
            self._log.debug(
                "api_request",
                method=api_request.method.value,
                path=api_request.path(),
                query=api_request.clean_query(),
            )
        return self._transport.send(api_request)
