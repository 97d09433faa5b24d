"""Agregador de settings de infraestrutura.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.tailscale import (
    DEFAULT_SOCKS5_PROXY,
    TailscaleSettings,
    get_tailscale_settings,
)

__all__ = [
    "DEFAULT_SOCKS5_PROXY",
    # Tailscale
    "TailscaleSettings",
    "get_tailscale_settings",
]
