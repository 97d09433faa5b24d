"""Rede overlay Tailscale (sessão userspace via SOCKS5)."""

from app.infra.tailscale.session import TailscaleSession, create_tailscale_session

__all__ = [
    "TailscaleSession",
    "create_tailscale_session",
]
