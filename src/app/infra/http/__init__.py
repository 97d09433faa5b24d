"""Transporte HTTP (direto ou via rede overlay)."""

from app.infra.http.transport import (
    DirectTransport,
    HttpClientConfig,
    OverlayTransport,
    create_transport,
)

__all__ = [
    "DirectTransport",
    "HttpClientConfig",
    "OverlayTransport",
    "create_transport",
]
