"""Seleção de transporte HTTP para o backend.

Duas variantes, escolhidas uma vez no bootstrap:
- DirectTransport: httpx direto, com verificação TLS opcional
- OverlayTransport: cliente da sessão overlay (Tailscale)

Cada chamada a `client()` cria um cliente novo a partir da mesma
configuração imutável; o chamador fecha o cliente após o uso.
O timeout é aplicado em ambas as variantes, e ambas seguem redirects
(307/308 reenviam o POST com o mesmo corpo).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from config.settings import REQUEST_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from app.protocols import OverlaySessionProtocol, TransportProviderProtocol
    from config.settings import HomeAssistantSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    verify_ssl: bool = True

    @property
    def timeout(self) -> httpx.Timeout:
        """Timeout uniforme (connect, read, write, pool)."""
        return httpx.Timeout(self.timeout_seconds)


class DirectTransport:
    """Clientes httpx diretos, pela internet pública."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def client(self) -> httpx.AsyncClient:
        # verify=False só para backends locais/autoassinados (NOT_VERIFY_SSL=true)
        return httpx.AsyncClient(
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            follow_redirects=True,
        )


class OverlayTransport:
    """Clientes ligados a uma sessão de rede overlay."""

    def __init__(
        self,
        session: OverlaySessionProtocol,
        config: HttpClientConfig | None = None,
    ) -> None:
        self._session = session
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def client(self) -> httpx.AsyncClient:
        client = self._session.http_client()
        # Timeout e redirects da sessão não prevalecem sobre o configurado
        client.timeout = self._config.timeout
        client.follow_redirects = True
        return client


def create_transport(
    settings: HomeAssistantSettings,
    session: OverlaySessionProtocol | None = None,
) -> TransportProviderProtocol:
    """Escolhe o transporte a partir da configuração.

    Args:
        settings: Settings do backend (timeout e verificação TLS)
        session: Sessão overlay já criada; None = transporte direto

    Returns:
        Provedor de clientes httpx.
    """
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        verify_ssl=settings.verify_ssl,
    )
    if session is not None:
        logger.info(
            "http_transport_selected",
            extra={"transport": "overlay", "timeout_seconds": config.timeout_seconds},
        )
        return OverlayTransport(session, config)

    if not config.verify_ssl:
        logger.warning("http_transport_tls_verification_disabled")
    logger.info(
        "http_transport_selected",
        extra={"transport": "direct", "timeout_seconds": config.timeout_seconds},
    )
    return DirectTransport(config)
