"""Agregador de settings do relay Alexa → Home Assistant.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    get_base_settings,
)

# Backend settings
from config.settings.home_assistant import (
    REQUEST_TIMEOUT_SECONDS,
    SMART_HOME_PATH,
    HomeAssistantSettings,
    get_home_assistant_settings,
)

# Infrastructure settings
from config.settings.infra import (
    DEFAULT_SOCKS5_PROXY,
    TailscaleSettings,
    get_tailscale_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SOCKS5_PROXY",
    "REQUEST_TIMEOUT_SECONDS",
    "SMART_HOME_PATH",
    # Base
    "BaseSettings",
    # Backend
    "HomeAssistantSettings",
    # Infrastructure
    "TailscaleSettings",
    "get_base_settings",
    "get_home_assistant_settings",
    "get_tailscale_settings",
]
