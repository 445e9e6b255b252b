"""SDK exceptions.

Network failures and HTTP error statuses are not wrapped: callers get
`httpx.HTTPError` / `httpx.HTTPStatusError` as raised by httpx.
"""

from __future__ import annotations


class PactError(Exception):
    """Base class for the SDK's own exceptions."""


class InvalidArgumentError(PactError, ValueError):
    """An argument breaks a precondition of the endpoint.

    Raised before any request is sent.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
