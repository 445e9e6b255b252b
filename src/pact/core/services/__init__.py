"""Services, one per Pact API resource."""

from pact.core.services.base import AbstractService
from pact.core.services.channels import ChannelService

__all__ = [
    "AbstractService",
    "ChannelService",
]
