"""Domain models: descriptions of API requests, free of HTTP and CLI concerns."""

from pact.core.domain.models import ApiRequest, ChannelProvider, HttpMethod, SortDirection

__all__ = [
    "ApiRequest",
    "ChannelProvider",
    "HttpMethod",
    "SortDirection",
]
