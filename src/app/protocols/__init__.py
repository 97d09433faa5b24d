"""Protocolos e contratos do core da aplicação."""

from .http_client import (
    HomeAssistantClientProtocol,
    OverlaySessionProtocol,
    TransportProviderProtocol,
)

__all__ = [
    "HomeAssistantClientProtocol",
    "OverlaySessionProtocol",
    "TransportProviderProtocol",
]
