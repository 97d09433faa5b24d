"""Settings base do relay Alexa → Home Assistant.

Configurações comuns ao processo (logging, modo debug, formato de erro).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SERVICE_NAME = "alexa-ha-relay"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        service_name: Nome do serviço para logs
        debug: Modo debug (logs de desenvolvimento + token de fallback)
        log_level: Nível de log explícito (vazio = derivado de debug)
        error_response_documents: Se True, falhas viram ErrorResponse da Alexa
            em vez de falha da invocação
    """

    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    log_level: str = ""
    error_response_documents: bool = False

    @property
    def effective_log_level(self) -> str:
        """Nível de log efetivo (LOG_LEVEL ou DEBUG/INFO conforme modo)."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=os.getenv("DEBUG", "") == "true",
        log_level=os.getenv("LOG_LEVEL", ""),
        error_response_documents=os.getenv("ERROR_RESPONSE_DOCUMENTS", "") == "true",
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
