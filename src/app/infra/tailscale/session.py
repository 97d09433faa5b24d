"""Sessão Tailscale em modo userspace-networking.

O tailscaled é iniciado e autenticado fora do processo (script de
entrada do container, com `tailscale up --authkey=$TS_AUTHKEY`) e expõe
um proxy SOCKS5 local. Esta sessão apenas entrega clientes httpx
roteados por esse proxy, de modo que o backend seja alcançado pelo
endereço da tailnet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from config.settings import TailscaleSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TailscaleSession:
    """Handle da sessão overlay.

    Attributes:
        auth_key: Chave usada pelo bootstrap externo do nó (nunca logada)
        proxy_url: Proxy SOCKS5 do tailscaled
        hostname: Nome do nó na tailnet
        verify_ssl: Valida certificado TLS do backend
    """

    auth_key: str = field(repr=False)
    proxy_url: str
    hostname: str
    verify_ssl: bool = True

    def http_client(self) -> httpx.AsyncClient:
        """Cria cliente httpx roteado pela tailnet."""
        return httpx.AsyncClient(
            proxy=self.proxy_url,
            verify=self.verify_ssl,
            follow_redirects=True,
        )


def create_tailscale_session(
    settings: TailscaleSettings,
    verify_ssl: bool = True,
) -> TailscaleSession | None:
    """Cria a sessão overlay, ou None quando TS_AUTHKEY não está configurado."""
    if not settings.enabled:
        return None

    session = TailscaleSession(
        auth_key=settings.auth_key,
        proxy_url=settings.socks5_proxy_url,
        hostname=settings.hostname,
        verify_ssl=verify_ssl,
    )
    logger.info(
        "tailscale_session_configured",
        extra={"hostname": session.hostname, "proxy_url": session.proxy_url},
    )
    return session
