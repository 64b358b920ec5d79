"""
PORTS - Interfaces the infrastructure layer implements.
"""

from messenger.domain.ports.token_service import TokenService
from messenger.domain.ports.push_gateway import PushGateway

__all__ = [
    "TokenService",
    "PushGateway",
]
