"""Python SDK for the Pact.im REST API."""

from pact.client import PactClient
from pact.core.config import PactSettings
from pact.core.domain.models import ChannelProvider, SortDirection
from pact.core.errors import InvalidArgumentError, PactError
from pact.core.services.channels import ChannelService

__version__ = "0.1.0"
__all__ = [
    "ChannelProvider",
    "ChannelService",
    "InvalidArgumentError",
    "PactClient",
    "PactError",
    "PactSettings",
    "SortDirection",
]
