"""HTTP transport contract.

Services depend on this Protocol rather than on httpx; tests can pass any
object with a `send` method.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pact.core.domain.models import ApiRequest


@runtime_checkable
class RequestSender(Protocol):
    """Minimal contract for issuing a request.

    - `send` is synchronous: one request, one response.
    - It returns the decoded JSON, or `None` when the response has no body.
    """

    def send(self, request: ApiRequest) -> Any:
        """Issue `request` and return the response body."""

        ...
