"""Settings do backend Home Assistant.

O endpoint Smart Home da integração Alexa do Home Assistant recebe
o envelope da diretiva sem alterações.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

SMART_HOME_PATH: str = "/api/alexa/smart_home"
REQUEST_TIMEOUT_SECONDS: float = 10.0


@dataclass(frozen=True)
class HomeAssistantSettings:
    """Configurações do backend Home Assistant.

    Attributes:
        base_url: URL base da instância (sem barra final)
        long_lived_access_token: Token de fallback, usado só em modo debug
        verify_ssl: Valida certificado TLS do backend
        request_timeout_seconds: Timeout por requisição
    """

    base_url: str = ""
    long_lived_access_token: str = field(default="", repr=False)
    verify_ssl: bool = True
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS

    @property
    def smart_home_endpoint(self) -> str:
        """URL completa do endpoint Smart Home."""
        return f"{self.base_url}{SMART_HOME_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do backend.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("BASE_URL não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("timeout de requisição deve ser > 0")

        return errors


def _load_from_env() -> HomeAssistantSettings:
    """Carrega HomeAssistantSettings a partir de variáveis de ambiente."""
    return HomeAssistantSettings(
        base_url=os.getenv("BASE_URL", "").rstrip("/"),
        long_lived_access_token=os.getenv("LONG_LIVED_ACCESS_TOKEN", ""),
        verify_ssl=os.getenv("NOT_VERIFY_SSL", "") != "true",
    )


@lru_cache(maxsize=1)
def get_home_assistant_settings() -> HomeAssistantSettings:
    """Retorna instância cacheada de HomeAssistantSettings."""
    return _load_from_env()
