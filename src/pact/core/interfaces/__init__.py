"""Core contracts (Protocols) implemented by the adapters."""

from pact.core.interfaces.transport import RequestSender

__all__ = ["RequestSender"]
