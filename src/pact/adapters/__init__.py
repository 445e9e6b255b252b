"""I/O adapters (HTTP)."""

from pact.adapters.http_client import HttpTransport, build_client

__all__ = ["HttpTransport", "build_client"]
