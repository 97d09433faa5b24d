"""Protocolos HTTP usados pelo app.

Evita dependência direta das implementações concretas de transporte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx


class TransportProviderProtocol(Protocol):
    """Fornece clientes httpx prontos, com timeout já aplicado."""

    def client(self) -> httpx.AsyncClient: ...


class OverlaySessionProtocol(Protocol):
    """Sessão de rede overlay já estabelecida externamente.

    Conexão, autenticação e roteamento são responsabilidade da sessão.
    """

    def http_client(self) -> httpx.AsyncClient: ...


class HomeAssistantClientProtocol(Protocol):
    """Contrato mínimo para encaminhar diretivas ao backend."""

    async def forward_directive(
        self,
        event: dict[str, Any],
        access_token: str,
    ) -> dict[str, Any]: ...
