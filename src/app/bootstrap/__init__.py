"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: valida settings, configura logging
e monta o dispatcher uma única vez por processo.

Uso:
    from app.bootstrap import get_dispatcher

    dispatcher = get_dispatcher()  # ConfigurationError se BASE_URL ausente
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_home_assistant_settings,
    get_tailscale_settings,
)
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from app.use_cases.alexa import DirectiveDispatcher

logger = logging.getLogger(__name__)


def initialize_logging() -> None:
    """Configura logging estruturado conforme BaseSettings.

    Raises:
        ConfigurationError: Se LOG_LEVEL for inválido.
    """
    base = get_base_settings()
    try:
        configure_logging(
            level=base.effective_log_level,
            service_name=base.service_name,
            correlation_id_getter=get_correlation_id,
        )
    except ValueError as exc:
        raise ConfigurationError(f"Falha ao inicializar logging: {exc}") from exc


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Raises:
        ConfigurationError: Com todos os problemas encontrados.
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(
        f"home_assistant: {error}" for error in get_home_assistant_settings().validate()
    )
    errors.extend(f"tailscale: {error}" for error in get_tailscale_settings().validate())

    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    details = "\n".join(f"- {error}" for error in errors)
    raise ConfigurationError(f"Configuração inválida:\n{details}")


def build_dispatcher() -> DirectiveDispatcher:
    """Configura logging, valida settings e monta o dispatcher."""
    from app.bootstrap.dependencies import create_directive_dispatcher

    initialize_logging()
    validate_runtime_settings()
    dispatcher = create_directive_dispatcher(
        get_base_settings(),
        get_home_assistant_settings(),
        get_tailscale_settings(),
    )
    logger.info("dispatcher_ready", extra={"component": "bootstrap"})
    return dispatcher


@lru_cache(maxsize=1)
def get_dispatcher() -> DirectiveDispatcher:
    """Obtém o dispatcher (singleton por processo).

    Falhas de configuração não são cacheadas: toda invocação as relança.
    """
    return build_dispatcher()
