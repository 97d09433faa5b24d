"""Factories de dependências do despacho de diretivas.

Montagem: settings → sessão overlay (opcional) → transporte → cliente
do backend → dispatcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.home_assistant import HomeAssistantHttpClient
from app.infra.http import create_transport
from app.infra.tailscale import create_tailscale_session
from app.use_cases.alexa import DirectiveDispatcher

if TYPE_CHECKING:
    from config.settings import BaseSettings, HomeAssistantSettings, TailscaleSettings


def create_directive_dispatcher(
    base: BaseSettings,
    home_assistant: HomeAssistantSettings,
    tailscale: TailscaleSettings,
) -> DirectiveDispatcher:
    """Cria o dispatcher com o transporte escolhido pela configuração."""
    session = create_tailscale_session(tailscale, verify_ssl=home_assistant.verify_ssl)
    transport = create_transport(home_assistant, session)
    backend = HomeAssistantHttpClient(transport, home_assistant.smart_home_endpoint)
    return DirectiveDispatcher(
        backend,
        debug=base.debug,
        fallback_token=home_assistant.long_lived_access_token,
    )
