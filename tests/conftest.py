"""Configuração do pytest para o relay Alexa → Home Assistant."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.bootstrap import get_dispatcher  # noqa: E402
from config.settings import (  # noqa: E402
    get_base_settings,
    get_home_assistant_settings,
    get_tailscale_settings,
)

_ENV_VARS = (
    "BASE_URL",
    "DEBUG",
    "LONG_LIVED_ACCESS_TOKEN",
    "NOT_VERIFY_SSL",
    "LOG_LEVEL",
    "SERVICE_NAME",
    "ERROR_RESPONSE_DOCUMENTS",
    "TS_AUTHKEY",
    "TS_SOCKS5_PROXY",
    "TS_HOSTNAME",
)


def _clear_caches() -> None:
    get_base_settings.cache_clear()
    get_home_assistant_settings.cache_clear()
    get_tailscale_settings.cache_clear()
    get_dispatcher.cache_clear()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Remove variáveis do relay do ambiente e limpa singletons."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def discover_event() -> dict:
    """Diretiva Discover (escopo em payload.scope)."""
    return {
        "directive": {
            "header": {
                "namespace": "Alexa.Discovery",
                "name": "Discover",
                "payloadVersion": "3",
                "messageId": "msg-discover-1",
            },
            "payload": {"scope": {"type": "BearerToken", "token": "discover-token"}},
        }
    }


@pytest.fixture
def turn_on_event() -> dict:
    """Diretiva TurnOn (escopo em endpoint.scope)."""
    return {
        "directive": {
            "header": {
                "namespace": "Alexa.PowerController",
                "name": "TurnOn",
                "payloadVersion": "3",
                "messageId": "msg-turn-on-1",
                "correlationToken": "corr-token-1",
            },
            "endpoint": {
                "scope": {"type": "BearerToken", "token": "endpoint-token"},
                "endpointId": "light.kitchen",
                "cookie": {},
            },
            "payload": {},
        }
    }


@pytest.fixture
def discover_response() -> dict:
    """Resposta Discover.Response típica do Home Assistant."""
    return {
        "event": {
            "header": {
                "namespace": "Alexa.Discovery",
                "name": "Discover.Response",
                "payloadVersion": "3",
                "messageId": "resp-1",
            },
            "payload": {
                "endpoints": [
                    {
                        "endpointId": "light#kitchen",
                        "friendlyName": "Kitchen",
                        "displayCategories": ["LIGHT"],
                        "capabilities": [
                            {"type": "AlexaInterface", "interface": "Alexa", "version": "3"}
                        ],
                    }
                ]
            },
        }
    }
