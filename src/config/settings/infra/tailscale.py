"""Settings da rede overlay Tailscale.

O nó Tailscale roda em modo userspace-networking e expõe um proxy
SOCKS5 local; o processo apenas roteia o tráfego por ele.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_SOCKS5_PROXY = "socks5://localhost:1055"
DEFAULT_HOSTNAME = "alexa-ha-relay"


@dataclass(frozen=True)
class TailscaleSettings:
    """Configurações do transporte via Tailscale.

    Attributes:
        auth_key: Chave de autenticação do nó (vazio = overlay desabilitado)
        socks5_proxy_url: Proxy SOCKS5 exposto pelo tailscaled
        hostname: Nome do nó na tailnet (apenas para logs)
    """

    auth_key: str = field(default="", repr=False)
    socks5_proxy_url: str = DEFAULT_SOCKS5_PROXY
    hostname: str = DEFAULT_HOSTNAME

    @property
    def enabled(self) -> bool:
        """Retorna True se o transporte overlay deve ser usado."""
        return bool(self.auth_key)

    def validate(self) -> list[str]:
        """Valida configurações do overlay (só quando habilitado)."""
        errors: list[str] = []

        if self.enabled and not self.socks5_proxy_url.startswith(
            ("socks5://", "socks5h://")
        ):
            errors.append("TS_SOCKS5_PROXY deve usar esquema socks5:// ou socks5h://")

        return errors


def _load_tailscale_from_env() -> TailscaleSettings:
    """Carrega TailscaleSettings de variáveis de ambiente."""
    return TailscaleSettings(
        auth_key=os.getenv("TS_AUTHKEY", ""),
        socks5_proxy_url=os.getenv("TS_SOCKS5_PROXY", DEFAULT_SOCKS5_PROXY),
        hostname=os.getenv("TS_HOSTNAME", DEFAULT_HOSTNAME),
    )


@lru_cache(maxsize=1)
def get_tailscale_settings() -> TailscaleSettings:
    """Retorna instância cacheada de TailscaleSettings."""
    return _load_tailscale_from_env()
